"""Selection of the class declarations exported as controls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping

from ..config import ControlGenConfig
from ..logging import get_logger
from ..models import TypeDescriptor

_LOGGER = get_logger("namespaces")


@dataclass(frozen=True)
class Control:
    """A class declaration under the control namespace root."""

    name: str
    namespace: str
    declaration: TypeDescriptor


def is_class(descriptor: TypeDescriptor) -> bool:
    return descriptor.kind == "object" and descriptor.role == "class"


def keep_namespace(namespace: str, descriptor: TypeDescriptor, config: ControlGenConfig) -> bool:
    """Return True when ``namespace`` names a control that should be exported."""
    return (
        is_class(descriptor)
        and namespace.startswith(config.namespace_prefix)
        and namespace not in config.excluded_namespaces
    )


def select_controls(
    env: Mapping[str, TypeDescriptor], config: ControlGenConfig
) -> List[Control]:
    """Return the controls found in ``env`` ordered by qualified name."""
    controls: List[Control] = []
    for namespace in sorted(env):
        descriptor = env[namespace]
        if not keep_namespace(namespace, descriptor, config):
            if namespace in config.excluded_namespaces:
                _LOGGER.debug("Skipping excluded namespace %s", namespace)
            continue
        controls.append(
            Control(
                name=namespace.rsplit(".", 1)[-1],
                namespace=namespace,
                declaration=descriptor,
            )
        )
    return controls


__all__ = ["Control", "is_class", "keep_namespace", "select_controls"]
