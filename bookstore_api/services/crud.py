from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Protocol, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from bookstore_api.core.logging import OperationLogger

INTERNAL_ERROR_MESSAGE = "Something failed. Please contact IT Support"

EntityT = TypeVar("EntityT")
CreateT = TypeVar("CreateT", bound=BaseModel)
UpdateT = TypeVar("UpdateT", bound=BaseModel)


class EntityRepository(Protocol[EntityT]):
    """Storage primitives consumed by CrudService."""

    async def find_all(self) -> List[EntityT]: ...

    async def find_by_id(self, entity_id: int) -> Optional[EntityT]: ...

    async def exists(self, entity_id: int) -> bool: ...

    async def create(self, entity: EntityT) -> bool: ...

    async def update(self, entity: EntityT) -> bool: ...

    async def delete(self, entity: EntityT) -> bool: ...


class EntityMapper(Protocol[EntityT]):
    def to_read(self, entity: EntityT) -> BaseModel: ...

    def to_entity(self, dto: BaseModel) -> EntityT: ...


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a handler operation: HTTP status plus optional content."""

    status_code: int
    content: Any = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @classmethod
    def ok(cls, content: Any) -> "OperationResult":
        return cls(200, content)

    @classmethod
    def created(cls, content: Any) -> "OperationResult":
        return cls(201, content)

    @classmethod
    def no_content(cls) -> "OperationResult":
        return cls(204)

    @classmethod
    def bad_request(cls, detail: Any = "Bad Request") -> "OperationResult":
        return cls(400, detail)

    @classmethod
    def not_found(cls) -> "OperationResult":
        return cls(404, "Not Found")

    @classmethod
    def internal_error(cls) -> "OperationResult":
        return cls(500, INTERNAL_ERROR_MESSAGE)


class CrudService(Generic[EntityT, CreateT, UpdateT]):
    """
    Request handling pattern shared by the catalog resources.

    Every operation validates its input, calls the repository, maps entities
    to read DTOs and logs each step under an explicit operation label. Faults
    raised by the repository or the mapper never escape: they are logged and
    turned into a 500 result carrying INTERNAL_ERROR_MESSAGE.

    Subclasses set `label`, `create_schema` and `update_schema`.
    """

    label: str = "Crud"
    create_schema: Type[CreateT]
    update_schema: Type[UpdateT]

    def __init__(
        self,
        repository: EntityRepository[EntityT],
        mapper: EntityMapper[EntityT],
        logger: Optional[OperationLogger] = None,
    ) -> None:
        self.repository = repository
        self.mapper = mapper
        self.logger = logger or OperationLogger(type(self).__module__)

    def _location(self, operation: str) -> str:
        return f"{self.label} - {operation}"

    def _validate(self, schema: Type[BaseModel], payload: Any) -> Tuple[Optional[BaseModel], Any]:
        try:
            return schema.model_validate(payload), None
        except ValidationError as exc:
            return None, exc.errors(include_url=False, include_context=False)

    def _internal_error(self, location: str, error: BaseException | str) -> OperationResult:
        if isinstance(error, BaseException):
            inner = error.__cause__ or error.__context__
            message = f"{error} - {inner}" if inner else str(error)
        else:
            message = error
        self.logger.error(location, message)
        return OperationResult.internal_error()

    # PUBLIC_INTERFACE
    async def list(self) -> OperationResult:
        """Return every entity as read DTOs (200)."""
        location = self._location("List")
        try:
            self.logger.info(location, "Request was submitted")
            entities = await self.repository.find_all()
            response = [self.mapper.to_read(e) for e in entities]
            self.logger.info(location, "Successful")
            return OperationResult.ok(response)
        except Exception as exc:
            return self._internal_error(location, exc)

    # PUBLIC_INTERFACE
    async def get(self, entity_id: int) -> OperationResult:
        """Return one entity (200) or 404 when absent."""
        location = self._location("Get")
        try:
            self.logger.info(location, f"Request was submitted with id: {entity_id}")
            entity = await self.repository.find_by_id(entity_id)
            if entity is None:
                self.logger.warn(location, f"NotFound for id: {entity_id}")
                return OperationResult.not_found()
            response = self.mapper.to_read(entity)
            self.logger.info(location, f"Successful for id: {entity_id}")
            return OperationResult.ok(response)
        except Exception as exc:
            return self._internal_error(location, exc)

    # PUBLIC_INTERFACE
    async def create(self, payload: Any) -> OperationResult:
        """
        Validate `payload` against the create schema and persist it.

        Returns 400 for a missing or invalid body, 500 when the repository
        reports failure, and 201 with the created entity otherwise.
        """
        location = self._location("Create")
        try:
            self.logger.info(location, "Request was submitted")
            if payload is None:
                self.logger.warn(location, "Empty request was submitted")
                return OperationResult.bad_request("Empty request was submitted")
            dto, errors = self._validate(self.create_schema, payload)
            if dto is None:
                self.logger.warn(location, "Data was incomplete")
                return OperationResult.bad_request(errors)
            entity = self.mapper.to_entity(dto)
            is_success = await self.repository.create(entity)
            if not is_success:
                return self._internal_error(location, "Create failed")
            self.logger.info(location, "Successful")
            return OperationResult.created(self.mapper.to_read(entity))
        except Exception as exc:
            return self._internal_error(location, exc)

    # PUBLIC_INTERFACE
    async def update(self, entity_id: int, payload: Any) -> OperationResult:
        """
        Replace the mutable fields of entity `entity_id`.

        The id/body checks run before any storage access; the existence check
        runs before schema validation.
        """
        location = self._location("Update")
        try:
            self.logger.info(location, f"Request was submitted with id: {entity_id}")
            if entity_id < 1 or payload is None or not isinstance(payload, dict) or payload.get("id") != entity_id:
                self.logger.warn(location, "Failed with bad data")
                return OperationResult.bad_request("Failed with bad data")
            if not await self.repository.exists(entity_id):
                self.logger.warn(location, f"NotFound for id: {entity_id}")
                return OperationResult.not_found()
            dto, errors = self._validate(self.update_schema, payload)
            if dto is None:
                self.logger.warn(location, "Data was incomplete")
                return OperationResult.bad_request(errors)
            entity = self.mapper.to_entity(dto)
            is_success = await self.repository.update(entity)
            if not is_success:
                return self._internal_error(location, f"Failed for id: {entity_id}")
            self.logger.info(location, "Successful")
            return OperationResult.no_content()
        except Exception as exc:
            return self._internal_error(location, exc)

    # PUBLIC_INTERFACE
    async def delete(self, entity_id: int) -> OperationResult:
        """Remove entity `entity_id`: 400 for ids < 1, 404 when absent, else 204."""
        location = self._location("Delete")
        try:
            self.logger.info(location, f"Request was submitted with id: {entity_id}")
            if entity_id < 1:
                self.logger.warn(location, "Failed with bad data")
                return OperationResult.bad_request("Failed with bad data")
            if not await self.repository.exists(entity_id):
                self.logger.warn(location, f"NotFound for id: {entity_id}")
                return OperationResult.not_found()
            entity = await self.repository.find_by_id(entity_id)
            is_success = await self.repository.delete(entity)
            if not is_success:
                return self._internal_error(location, f"Failed for id: {entity_id}")
            self.logger.info(location, "Successful")
            return OperationResult.no_content()
        except Exception as exc:
            return self._internal_error(location, exc)
