"""Base entity shared by EPCIS documents, events and their elements"""

import copy
import json
from typing import Any, Dict, Iterable, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

EntityT = TypeVar('EntityT', bound='Entity')


def same_value(left: Any, right: Any) -> bool:
    """Structural equality, comparing entities by their serialized form"""
    if isinstance(left, Entity) and isinstance(right, Entity):
        return type(left) is type(right) and left.to_dict() == right.to_dict()
    return left == right


class Entity(BaseModel):
    """Known fields are declared on the model, any other key is kept as an extension

    Fields use the snake_case name in Python and the EPCIS JSON name as alias.
    Only fields that were provided or set afterwards are serialized.
    """
    model_config = ConfigDict(populate_by_name=True, extra='allow')

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]] = None):
        """Build the entity from a raw EPCIS JSON mapping"""
        if data is None:
            return cls()
        return cls.model_validate(copy.deepcopy(data))

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    # Extensions

    @property
    def extensions(self) -> Dict[str, Any]:
        """Unknown keys in the order they were added"""
        return dict(self.model_extra or {})

    def set_extension(self: EntityT, key: str, value: Any) -> EntityT:
        fields = type(self).model_fields
        if key in fields or any(field.alias == key for field in fields.values()):
            raise ValueError(f"'{key}' is a standard field of {type(self).__name__}, not an extension")
        self.__pydantic_extra__[key] = value
        self.model_fields_set.add(key)
        return self

    def remove_extension(self: EntityT, key: str) -> EntityT:
        if self.model_extra is not None:
            self.model_extra.pop(key, None)
        self.model_fields_set.discard(key)
        return self

    # Field helpers used by the chained setters

    def _set(self: EntityT, name: str, value: Any) -> EntityT:
        setattr(self, name, value)
        return self

    def _unset(self: EntityT, name: str) -> EntityT:
        setattr(self, name, None)
        self.model_fields_set.discard(name)
        return self

    def _add(self: EntityT, name: str, item: Any) -> EntityT:
        return self._add_all(name, [item])

    def _add_all(self: EntityT, name: str, items: Iterable[Any]) -> EntityT:
        current = getattr(self, name) or []
        setattr(self, name, [*current, *items])
        return self

    def _remove(self: EntityT, name: str, item: Any) -> EntityT:
        current = getattr(self, name)
        if not current:
            return self
        for index, element in enumerate(current):
            if same_value(element, item):
                setattr(self, name, current[:index] + current[index + 1:])
                break
        return self

    def _remove_all(self: EntityT, name: str, items: Iterable[Any]) -> EntityT:
        for item in items:
            self._remove(name, item)
        return self
