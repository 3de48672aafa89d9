"""Tree-sitter powered provider for TypeScript declaration text."""

from __future__ import annotations

import time
from typing import Callable, Dict, FrozenSet, Iterator, List, Optional, Sequence, Tuple

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser

from .base import ProviderError, SourceText, TypeEnvironmentProvider
from ..constants import BUILTIN_TYPE_NAMES
from ..logging import get_logger
from ..models import CallSignature, Parameter, Property, TypeDescriptor, TypeEnvironment

Scope = Tuple[str, ...]

_MODULE_NODES = {"module", "internal_module"}
_CONTAINER_NODES = {
    "ambient_declaration",
    "export_statement",
    "expression_statement",
    "statement_block",
}
_ANNOTATION_NODES = {
    "type_annotation",
    "opting_type_annotation",
    "omitting_type_annotation",
    "parenthesized_type",
}
_METHOD_NODES = {"method_signature", "method_definition", "abstract_method_signature"}
_FIELD_NODES = {"public_field_definition", "property_signature"}

_LANGUAGE = Language(tree_sitter_typescript.language_typescript())


class TreeSitterProvider(TypeEnvironmentProvider):
    """Builds a declaration graph from ``.d.ts`` sources using tree-sitter."""

    def __init__(self) -> None:
        self._parser = Parser(_LANGUAGE)
        self.logger = get_logger("environment")

    def load(self, sources: Sequence[SourceText]) -> TypeEnvironment:
        roots = [self._parse(source) for source in sources]

        enums: Dict[str, List[str]] = {}
        for root in roots:
            _collect_enums(root, enums)

        builder = _EnvironmentBuilder(enums)
        for root in roots:
            builder.add_source(root)
        environment = builder.environment
        self.logger.debug(
            "Loaded %d declarations and %d enums from %d sources",
            len(environment.env),
            len(environment.enums),
            len(sources),
        )
        return environment

    def _parse(self, source: SourceText) -> Node:
        started = time.perf_counter()
        tree = self._parser.parse(source.text.encode("utf-8"))
        root = tree.root_node
        if root.has_error:
            error = _first_error(root)
            row, column = error.start_point
            snippet = _text(error).splitlines()[0][:40] if error.text else ""
            raise ProviderError(
                f"{source.identifier}:{row + 1}:{column + 1}: syntax error near {snippet!r}"
            )
        self.logger.debug(
            "Parsed %s in %.1f ms", source.identifier, (time.perf_counter() - started) * 1000
        )
        return root


class _EnvironmentBuilder:
    """Accumulates declarations from parsed sources into one environment."""

    def __init__(self, enums: Dict[str, List[str]]) -> None:
        self.environment = TypeEnvironment(enums=enums)
        self._handlers: Dict[str, Callable[[Node, Scope], None]] = {
            "module": self._add_module,
            "internal_module": self._add_module,
            "class_declaration": self._add_class,
            "abstract_class_declaration": self._add_class,
            "interface_declaration": self._add_interface,
            "enum_declaration": self._add_enum,
            "function_signature": self._add_function,
            "function_declaration": self._add_function,
            "lexical_declaration": self._add_variables,
            "variable_declaration": self._add_variables,
        }

    def add_source(self, root: Node) -> None:
        for node, scope in _iter_declarations(root, ()):
            handler = self._handlers.get(node.type)
            if handler is not None:
                handler(node, scope)

    # ------------------------------------------------------------------
    # Declarations

    def _add_module(self, node: Node, scope: Scope) -> None:
        self._ensure_module(scope + _module_path(node))

    def _add_class(self, node: Node, scope: Scope) -> None:
        name = _text(node.child_by_field_name("name"))
        fqn = _qualify(scope, name)
        type_params = _type_parameter_names(node)
        instance = self._ensure_object(fqn, "class")
        static = TypeDescriptor(kind="object", role="interface", name=fqn)
        body = node.child_by_field_name("body")
        if body is not None:
            for member in _named(body):
                target = static if _has_token(member, "static") else instance
                self._add_member(target, member, scope, type_params)
        self._attach_static_side(scope, name, static)

    def _add_interface(self, node: Node, scope: Scope) -> None:
        fqn = _qualify(scope, _text(node.child_by_field_name("name")))
        type_params = _type_parameter_names(node)
        descriptor = self._ensure_object(fqn, "interface")
        body = node.child_by_field_name("body")
        if body is not None:
            for member in _named(body):
                self._add_member(descriptor, member, scope, type_params)

    def _add_enum(self, node: Node, scope: Scope) -> None:
        fqn = _qualify(scope, _text(node.child_by_field_name("name")))
        self.environment.env.setdefault(fqn, TypeDescriptor(kind="enum", name=fqn))

    def _add_function(self, node: Node, scope: Scope) -> None:
        module = self._module_for(scope)
        if module is None:
            return
        name = _text(node.child_by_field_name("name"))
        signature = self._signature(node, scope, _type_parameter_names(node))
        self._add_call(module, name, signature)

    def _add_variables(self, node: Node, scope: Scope) -> None:
        module = self._module_for(scope)
        if module is None:
            return
        for declarator in _named(node):
            if declarator.type != "variable_declarator":
                continue
            name = _text(declarator.child_by_field_name("name"))
            module.properties[name] = Property(
                name=name,
                type=self._annotated_type(declarator, scope, frozenset()),
            )

    # ------------------------------------------------------------------
    # Members

    def _add_member(
        self, target: TypeDescriptor, member: Node, scope: Scope, type_params: FrozenSet[str]
    ) -> None:
        kind = member.type
        if kind in _FIELD_NODES:
            name = _property_name(member)
            target.properties[name] = Property(
                name=name,
                type=self._annotated_type(member, scope, type_params),
                optional=_has_token(member, "?"),
            )
        elif kind in _METHOD_NODES:
            self._add_method(target, member, scope, type_params)
        elif kind == "call_signature":
            target.calls.append(self._signature(member, scope, type_params))

    def _add_method(
        self, target: TypeDescriptor, member: Node, scope: Scope, type_params: FrozenSet[str]
    ) -> None:
        name = _property_name(member)
        if name == "constructor":
            return
        method_params = type_params | _type_parameter_names(member)
        signature = self._signature(member, scope, method_params)
        if _has_token(member, "get"):
            accessor_type = signature.return_type or _builtin("any")
            target.properties[name] = Property(name=name, type=accessor_type)
        elif _has_token(member, "set"):
            if name not in target.properties:
                accessor_type = (
                    signature.parameters[0].type if signature.parameters else _builtin("any")
                )
                target.properties[name] = Property(name=name, type=accessor_type)
        else:
            self._add_call(target, name, signature)

    def _add_call(self, target: TypeDescriptor, name: str, signature: CallSignature) -> None:
        existing = target.properties.get(name)
        if existing is not None and existing.type.kind == "object" and existing.type.calls:
            # Overloads accumulate on one function-shaped declaration.
            existing.type.calls.append(signature)
            return
        function = TypeDescriptor(kind="object", role="interface", calls=[signature])
        target.properties[name] = Property(name=name, type=function)

    def _signature(self, node: Node, scope: Scope, type_params: FrozenSet[str]) -> CallSignature:
        parameters: List[Parameter] = []
        params_node = node.child_by_field_name("parameters")
        if params_node is not None:
            for param in _named(params_node):
                if param.type not in {"required_parameter", "optional_parameter"}:
                    continue
                pattern = param.child_by_field_name("pattern")
                name = _text(pattern).lstrip(".") if pattern is not None else ""
                parameters.append(
                    Parameter(
                        name=name,
                        type=self._annotated_type(param, scope, type_params),
                        optional=param.type == "optional_parameter",
                    )
                )
        return_node = node.child_by_field_name("return_type")
        return_type = self._convert(return_node, scope, type_params) if return_node else None
        return CallSignature(parameters=parameters, return_type=return_type)

    # ------------------------------------------------------------------
    # Type expressions

    def _annotated_type(
        self, node: Node, scope: Scope, type_params: FrozenSet[str]
    ) -> TypeDescriptor:
        annotation = node.child_by_field_name("type")
        if annotation is None:
            return _builtin("any")
        return self._convert(annotation, scope, type_params)

    def _convert(self, node: Node, scope: Scope, type_params: FrozenSet[str]) -> TypeDescriptor:
        kind = node.type
        if kind in _ANNOTATION_NODES:
            inner = next(_named(node), None)
            return self._convert(inner, scope, type_params) if inner else _builtin("any")
        if kind == "predefined_type":
            name = _text(node)
            if name in BUILTIN_TYPE_NAMES:
                return _builtin(name)
            return TypeDescriptor(kind="predefined", name=name)
        if kind in {"type_identifier", "nested_type_identifier"}:
            return self._resolve(_compact(_text(node)), scope, type_params)
        if kind == "generic_type":
            arguments_node = node.child_by_field_name("type_arguments")
            arguments = (
                [self._convert(arg, scope, type_params) for arg in _named(arguments_node)]
                if arguments_node is not None
                else []
            )
            name = _compact(_text(node.child_by_field_name("name")))
            return TypeDescriptor(kind="reference", name=name, type_arguments=arguments)
        if kind == "array_type":
            element = next(_named(node))
            return TypeDescriptor(
                kind="reference",
                name="Array",
                type_arguments=[self._convert(element, scope, type_params)],
            )
        if kind == "function_type":
            signature = self._signature(node, scope, type_params | _type_parameter_names(node))
            return TypeDescriptor(kind="object", role="interface", calls=[signature])
        if kind == "object_type":
            descriptor = TypeDescriptor(kind="object", role="interface")
            for member in _named(node):
                self._add_member(descriptor, member, scope, type_params)
            return descriptor
        return TypeDescriptor(kind=_unmodelled_kind(kind), name=_compact(_text(node)))

    def _resolve(self, name: str, scope: Scope, type_params: FrozenSet[str]) -> TypeDescriptor:
        if name in type_params:
            return TypeDescriptor(kind="type-parameter", name=name)
        enums = self.environment.enums
        for depth in range(len(scope), -1, -1):
            candidate = _qualify(scope[:depth], name)
            if candidate in enums:
                return TypeDescriptor(kind="enum", name=candidate)
        return TypeDescriptor(kind="reference", name=name)

    # ------------------------------------------------------------------
    # Graph bookkeeping

    def _ensure_object(self, fqn: str, role: str) -> TypeDescriptor:
        env = self.environment.env
        existing = env.get(fqn)
        if existing is not None and existing.kind == "object":
            if role == "class":
                existing.role = role
            return existing
        descriptor = TypeDescriptor(kind="object", role=role, name=fqn)
        env[fqn] = descriptor
        return descriptor

    def _ensure_module(self, path: Scope) -> TypeDescriptor:
        env = self.environment.env
        key = _module_key(path)
        existing = env.get(key)
        if existing is not None:
            return existing
        descriptor: Optional[TypeDescriptor] = None
        if len(path) > 1:
            parent = self._ensure_module(path[:-1])
            member = parent.properties.get(path[-1])
            if member is not None and member.type.kind == "object":
                # A namespace merging with a class shares the class's static side.
                descriptor = member.type
            else:
                descriptor = TypeDescriptor(kind="object", role="module", name=".".join(path))
                parent.properties[path[-1]] = Property(name=path[-1], type=descriptor)
        if descriptor is None:
            descriptor = TypeDescriptor(kind="object", role="module", name=".".join(path))
        env[key] = descriptor
        return descriptor

    def _module_for(self, scope: Scope) -> Optional[TypeDescriptor]:
        return self._ensure_module(scope) if scope else None

    def _attach_static_side(self, scope: Scope, name: str, static: TypeDescriptor) -> None:
        module = self._module_for(scope)
        if module is None:
            return
        existing = module.properties.get(name)
        if existing is not None and existing.type.kind == "object":
            existing.type.properties.update(static.properties)
            return
        module.properties[name] = Property(name=name, type=static)


def _collect_enums(root: Node, enums: Dict[str, List[str]]) -> None:
    for node, scope in _iter_declarations(root, ()):
        if node.type != "enum_declaration":
            continue
        fqn = _qualify(scope, _text(node.child_by_field_name("name")))
        members = enums.setdefault(fqn, [])
        body = node.child_by_field_name("body")
        if body is None:
            continue
        for member in _named(body):
            name_node = member.child_by_field_name("name") if member.type == "enum_assignment" else member
            qualified = f"{fqn}.{_unquote(_text(name_node))}"
            if qualified not in members:
                members.append(qualified)


def _iter_declarations(node: Node, scope: Scope) -> Iterator[Tuple[Node, Scope]]:
    """Yield declaration nodes with the namespace path that encloses them."""
    for child in _named(node):
        if child.type in _MODULE_NODES:
            yield child, scope
            body = child.child_by_field_name("body")
            if body is not None:
                yield from _iter_declarations(body, scope + _module_path(child))
        elif child.type in _CONTAINER_NODES:
            yield from _iter_declarations(child, scope)
        else:
            yield child, scope


def _first_error(node: Node) -> Node:
    for child in node.children:
        if child.type == "ERROR" or child.is_missing:
            return child
        if child.has_error:
            return _first_error(child)
    return node


def _named(node: Node) -> Iterator[Node]:
    for child in node.named_children:
        if child.type != "comment":
            yield child


def _has_token(node: Node, token: str) -> bool:
    return any(child.type == token for child in node.children)


def _text(node: Optional[Node]) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8")


def _compact(text: str) -> str:
    return "".join(text.split())


def _unquote(text: str) -> str:
    if len(text) >= 2 and text[0] == text[-1] and text[0] in {'"', "'"}:
        return text[1:-1]
    return text


def _property_name(node: Node) -> str:
    return _unquote(_text(node.child_by_field_name("name")))


def _module_path(node: Node) -> Scope:
    name = _unquote(_compact(_text(node.child_by_field_name("name"))))
    return tuple(part for part in name.split(".") if part)


def _module_key(path: Scope) -> str:
    return "module:" + ".".join(path)


def _qualify(scope: Scope, name: str) -> str:
    return ".".join(scope + (name,))


def _type_parameter_names(node: Node) -> FrozenSet[str]:
    params = node.child_by_field_name("type_parameters")
    if params is None:
        return frozenset()
    return frozenset(
        _text(param.child_by_field_name("name"))
        for param in _named(params)
        if param.type == "type_parameter"
    )


def _builtin(name: str) -> TypeDescriptor:
    return TypeDescriptor(kind="builtin", name=name)


def _unmodelled_kind(node_type: str) -> str:
    base = node_type[: -len("_type")] if node_type.endswith("_type") else node_type
    return base.replace("_", "-")


__all__ = ["TreeSitterProvider"]
