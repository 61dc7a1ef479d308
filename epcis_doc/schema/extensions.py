import re
from typing import Any, FrozenSet, Iterable, List, Mapping, Optional

from ..errors import ExtensionViolation
from .field_sets import EVENT, resolve_event_type
from .registry import FieldSetRegistry


# prefix:localName, exactly one colon, both parts non-empty
NAMESPACED_KEY = re.compile(r'^([^:]+):([^:]+)$')

# Prefixes declared by the standard GS1 EPCIS JSON-LD context, accepted only when
# passed as builtin_prefixes
GS1_CONTEXT_PREFIXES = frozenset({
    'gs1', 'cbv', 'cbvmda', 'epcis', 'rdf', 'rdfs', 'owl', 'xsd', 'dcterms',
})


def collect_prefixes(context: Any) -> FrozenSet[str]:
    """Namespace prefixes declared by an @context value

    A mapping declares its keys, a sequence declares the keys of each mapping
    it contains and a plain string declares nothing. JSON-LD keywords
    (`@vocab`, `@base`, ...) are not prefixes.
    """
    if isinstance(context, Mapping):
        mappings = [context]
    elif isinstance(context, (list, tuple)):
        mappings = [element for element in context if isinstance(element, Mapping)]
    else:
        mappings = []

    prefixes = set()
    for mapping in mappings:
        prefixes.update(key for key in mapping if isinstance(key, str) and not key.startswith('@'))
    return frozenset(prefixes)


class ExtensionValidator:
    """Checks that every non-standard field of a document is a declared namespace extension"""

    def __init__(self,
                 field_sets: Optional[FieldSetRegistry] = None,
                 builtin_prefixes: Iterable[str] = ()):
        """
        Args:
            field_sets: Registry used to tell standard fields from extensions
            builtin_prefixes: Prefixes accepted even when @context does not
                declare them, e.g. GS1_CONTEXT_PREFIXES; none by default
        """
        self.field_sets = field_sets or FieldSetRegistry()
        self.builtin_prefixes = frozenset(builtin_prefixes)

    def validate(self, node: Any, field_set_name: str, context: Any = None, path: str = '$') -> List[ExtensionViolation]:
        """Validate the extensions of node and of everything below it

        Args:
            node: Raw JSON-like node, typically a whole document
            field_set_name: Field set of node, e.g. 'EPCISDocument'
            context: The document's @context value
            path: JSON path of node

        Returns:
            Every extension violation found, in document order

        Raises:
            UnknownFieldSetError: if a field set name is not registered
            UnknownEventTypeError: if an event node has no known discriminator
        """
        prefixes = collect_prefixes(context) | self.builtin_prefixes
        errors: List[ExtensionViolation] = []
        self._validate_node(node, field_set_name, prefixes, path, errors)
        return errors

    def _validate_node(self, node: Any, field_set_name: str, prefixes: FrozenSet[str],
                       path: str, errors: List[ExtensionViolation]) -> None:
        """Walk a standard node: recurse into standard children, check foreign keys"""
        if field_set_name == EVENT:
            # `"event": {}` holds no event; the structural check reports it
            if not node:
                return
            field_set_name = resolve_event_type(node)

        partition = self.field_sets.ensure_field_set(node, field_set_name)

        for key in partition.known:
            child_field_set = self.field_sets.child_field_set(field_set_name, key)
            if child_field_set is None:
                continue
            value = node[key]
            if isinstance(value, (list, tuple)):
                for index, element in enumerate(value):
                    # Non-object entries are reported by the structural check
                    if isinstance(element, Mapping):
                        self._validate_node(element, child_field_set, prefixes, f"{path}.{key}[{index}]", errors)
            elif isinstance(value, Mapping):
                self._validate_node(value, child_field_set, prefixes, f"{path}.{key}", errors)

        for key in partition.foreign:
            key_path = f"{path}.{key}"
            if self._check_key(key, prefixes, key_path, errors):
                self._validate_extension(node[key], prefixes, key_path, errors)

    def _validate_extension(self, value: Any, prefixes: FrozenSet[str],
                            path: str, errors: List[ExtensionViolation]) -> None:
        """Walk an extension subtree, where every object key must be qualified"""
        if isinstance(value, Mapping):
            for key, child in value.items():
                key_path = f"{path}.{key}"
                if self._check_key(key, prefixes, key_path, errors):
                    self._validate_extension(child, prefixes, key_path, errors)
        elif isinstance(value, (list, tuple)):
            for index, element in enumerate(value):
                self._validate_extension(element, prefixes, f"{path}[{index}]", errors)

    @staticmethod
    def _check_key(key: Any, prefixes: FrozenSet[str], path: str, errors: List[ExtensionViolation]) -> bool:
        match = NAMESPACED_KEY.match(key) if isinstance(key, str) else None
        if match is None:
            errors.append(ExtensionViolation(
                path=path,
                message=f"Field '{key}' is not a standard field and is not namespace-qualified (expected prefix:localName)",
            ))
            return False

        prefix = match.group(1)
        if prefix not in prefixes:
            errors.append(ExtensionViolation(
                path=path,
                message=f"Namespace prefix '{prefix}' of field '{key}' is not declared in @context",
            ))
            return False
        return True
