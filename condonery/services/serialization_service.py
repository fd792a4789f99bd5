"""
    Serialization and deserialization service for the Portfolio.

    Design Pattern: Factory Method for deserialization
    ───────────────────────────────────────────────────
    ``PortfolioSerializer.deserialize`` rebuilds every entity through the
    same validating value types the parser uses, so a hand-edited data file
    can never smuggle an illegal value into the model.

    Output is stable: list order follows directory order and every set is
    written sorted, so ``serialize(deserialize(serialize(p)))`` equals
    ``serialize(p)``.
"""
import json
from typing import Any, Dict, List

from ..exceptions import DataConversionError, DuplicateEntityError, ValidationError
from ..models.client import Client
from ..models.portfolio import Portfolio
from ..models.property import Property
from ..types import Address, Email, FieldValue, Name, Phone, Tag

MISSING_FIELD_MESSAGE_FORMAT = "{entity}'s {field} field is missing!"
MESSAGE_DUPLICATE_PROPERTY = "Properties list contains duplicate property(s)."
MESSAGE_DUPLICATE_CLIENT = "Clients list contains duplicate client(s)."


class PortfolioSerializer:
    """
    Serialize / deserialize ``Portfolio`` instances.

    Usage:
        serializer = PortfolioSerializer()
        data = serializer.serialize(portfolio)        # → dict
        json_str = serializer.to_json(portfolio)      # → str
        portfolio = serializer.deserialize(data)      # → Portfolio
        portfolio = serializer.from_json(json_str)    # → Portfolio
    """

    # ── Serialization ────────────────────────────────────────────

    def serialize(self, portfolio: Portfolio) -> Dict[str, Any]:
        return {
            'properties': [self._serialize_property(p) for p in portfolio.properties],
            'clients': [self._serialize_client(c) for c in portfolio.clients],
        }

    def to_json(self, portfolio: Portfolio, *, indent: int = 2) -> str:
        return json.dumps(self.serialize(portfolio), indent=indent, ensure_ascii=False)

    @staticmethod
    def _serialize_property(prop: Property) -> Dict[str, Any]:
        return {
            'name': prop.name.value,
            'address': prop.address.value,
            'tags': sorted(prop.tag_names),
            'interested_clients': sorted(prop.interested_client_names),
        }

    @staticmethod
    def _serialize_client(client: Client) -> Dict[str, Any]:
        return {
            'name': client.name.value,
            'phone': client.phone.value,
            'email': client.email.value,
            'address': client.address.value,
            'tags': sorted(client.tag_names),
        }

    # ── Deserialization ──────────────────────────────────────────

    def deserialize(self, data: Any) -> Portfolio:
        """
        Rebuild a Portfolio from a dictionary (inverse of ``serialize``).

        Raises:
            DataConversionError: if the structure is wrong, a field is
                missing or illegal, or two entities share a name.
        """
        if not isinstance(data, dict):
            raise DataConversionError("Portfolio data must be a JSON object.")

        properties = [self._deserialize_property(item)
                      for item in self._list_of(data, 'properties')]
        clients = [self._deserialize_client(item)
                   for item in self._list_of(data, 'clients')]

        portfolio = Portfolio()
        try:
            portfolio.properties.set_all(properties)
        except DuplicateEntityError as e:
            raise DataConversionError(MESSAGE_DUPLICATE_PROPERTY) from e
        try:
            portfolio.clients.set_all(clients)
        except DuplicateEntityError as e:
            raise DataConversionError(MESSAGE_DUPLICATE_CLIENT) from e
        return portfolio

    def from_json(self, json_str: str) -> Portfolio:
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise DataConversionError(f"Invalid JSON: {e}") from e
        return self.deserialize(data)

    def _deserialize_property(self, item: Any) -> Property:
        entity = "Property"
        self._require_object(item, entity)
        return Property(
            name=self._field(item, 'name', Name, entity),
            address=self._field(item, 'address', Address, entity),
            tags=self._many(item, 'tags', Tag, entity),
            interested_clients=self._many(item, 'interested_clients', Name, entity),
        )

    def _deserialize_client(self, item: Any) -> Client:
        entity = "Client"
        self._require_object(item, entity)
        return Client(
            name=self._field(item, 'name', Name, entity),
            phone=self._field(item, 'phone', Phone, entity),
            email=self._field(item, 'email', Email, entity),
            address=self._field(item, 'address', Address, entity),
            tags=self._many(item, 'tags', Tag, entity),
        )

    # ── Field helpers ────────────────────────────────────────────

    @staticmethod
    def _list_of(data: Dict[str, Any], key: str) -> List[Any]:
        value = data.get(key, [])
        if not isinstance(value, list):
            raise DataConversionError(f"'{key}' must be a list.")
        return value

    @staticmethod
    def _require_object(item: Any, entity: str) -> None:
        if not isinstance(item, dict):
            raise DataConversionError(f"{entity} record must be a JSON object.")

    @staticmethod
    def _field(item: Dict[str, Any], key: str, value_type, entity: str) -> FieldValue:
        raw = item.get(key)
        if raw is None:
            raise DataConversionError(
                MISSING_FIELD_MESSAGE_FORMAT.format(entity=entity, field=value_type.__name__)
            )
        try:
            return value_type(raw)
        except ValidationError as e:
            raise DataConversionError(str(e)) from e

    @staticmethod
    def _many(item: Dict[str, Any], key: str, value_type, entity: str) -> frozenset:
        raw = item.get(key, [])
        if not isinstance(raw, list):
            raise DataConversionError(f"{entity}'s {key} must be a list.")
        try:
            return frozenset(value_type(value) for value in raw)
        except ValidationError as e:
            raise DataConversionError(str(e)) from e
