"""Shared repository service logic for one entity kind."""

from typing import Any, Dict, Generic, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from ..query import Predicate
from ..repositories import CollectionRepository, DocumentStore
from ...exceptions import EntityValidationError, RepositoryError, StoreError
from ...error_handler import handle_errors
from ...logging_config import get_logger

logger = get_logger(__name__)

E = TypeVar("E")
F = TypeVar("F")


class EntityService(Generic[E, F]):
    """Typed facade over one store collection.

    Subclasses name the collection, the entity type, the filter type and the
    write schemas, and translate their filter into a predicate. Reads degrade
    to an empty result on failure so lists render as "no data"; writes raise
    so callers know the change did not happen.
    """

    collection_name: str
    entity_type: Type[E]
    filter_type: Type[F]
    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]

    def __init__(self, store: DocumentStore):
        self._store = store

    @property
    def collection(self) -> CollectionRepository:
        return self._store.collection(self.collection_name)

    def build_predicate(self, filter: Optional[F]) -> Predicate:
        raise NotImplementedError

    def _coerce_filter(self, filter: Union[F, Mapping[str, Any], None]) -> Optional[F]:
        if filter is None or isinstance(filter, self.filter_type):
            return filter
        return self.filter_type.from_mapping(filter)

    def _validate(self, schema: Type[BaseModel], data: Union[BaseModel, Mapping[str, Any]]) -> Dict[str, Any]:
        """Validate write data and return the fields to store."""
        if isinstance(data, schema):
            return data.to_fields()
        if isinstance(data, BaseModel):
            data = data.model_dump(exclude_unset=True)
        try:
            return schema.model_validate(data).to_fields()
        except ValidationError as e:
            raise EntityValidationError(
                message=f"Invalid {self.collection_name} data: {e.error_count()} validation error(s)",
                details={'errors': e.errors(include_url=False, include_context=False)}
            ) from e

    def _before_update(self, current: Dict[str, Any], fields: Dict[str, Any]) -> None:
        """Hook to reject an update after validation; default accepts everything."""

    def _to_entity(self, document: Dict[str, Any]) -> E:
        return self.entity_type.from_document(document)

    @handle_errors(default_return=[], exception_type=StoreError)
    async def list(
        self,
        filter: Union[F, Mapping[str, Any], None] = None,
        newest_first: bool = False
    ) -> List[E]:
        """Entities matching ``filter`` in insertion order (or newest first)."""
        predicate = self.build_predicate(self._coerce_filter(filter))
        documents = self.collection.find(predicate)
        if newest_first:
            documents.sort(key=lambda doc: doc["created_at"], reverse=True)
        return [self._to_entity(doc) for doc in documents]

    @handle_errors(default_return=None, exception_type=StoreError)
    async def get_by_id(self, entity_id: str) -> Optional[E]:
        document = self.collection.find_by_id(entity_id)
        return self._to_entity(document) if document is not None else None

    @handle_errors(exception_type=RepositoryError, reraise=True)
    async def create(self, data: Union[BaseModel, Mapping[str, Any]]) -> E:
        """Validate and store a new entity; id and timestamps come from the store."""
        fields = self._validate(self.create_schema, data)
        collection = self.collection
        entity_id = collection.insert(fields)
        document = collection.find_by_id(entity_id)
        if document is None:
            raise RepositoryError(
                message=f"Created {self.collection_name} document {entity_id} could not be read back",
                details={'id': entity_id}
            )
        logger.info(f"Created {self.collection_name} document {entity_id}")
        return self._to_entity(document)

    @handle_errors(exception_type=RepositoryError, reraise=True)
    async def update(self, entity_id: str, data: Union[BaseModel, Mapping[str, Any]]) -> Optional[E]:
        """Merge validated fields, then return the entity as stored."""
        fields = self._validate(self.update_schema, data)
        collection = self.collection
        current = collection.find_by_id(entity_id)
        if current is None:
            return None
        self._before_update(current, fields)
        if not collection.update_by_id(entity_id, fields):
            return None
        document = collection.find_by_id(entity_id)
        return self._to_entity(document) if document is not None else None

    @handle_errors(exception_type=RepositoryError, reraise=True)
    async def delete(self, entity_id: str) -> bool:
        deleted = self.collection.delete_by_id(entity_id)
        if deleted:
            logger.info(f"Deleted {self.collection_name} document {entity_id}")
        return deleted

    @handle_errors(default_return=[], exception_type=StoreError)
    async def list_categories(self) -> List[str]:
        return sorted(self.collection.distinct_values("category"))

    @handle_errors(default_return=[], exception_type=StoreError)
    async def list_tags(self) -> List[str]:
        return sorted(self.collection.distinct_values("tags"))
