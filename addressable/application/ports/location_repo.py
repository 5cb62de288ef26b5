"""Port interface for location persistence."""

from abc import ABC, abstractmethod

from addressable.domain.entities.location import Location


class LocationRepository(ABC):
    @abstractmethod
    async def save(self, location: Location) -> Location:
        ...

    @abstractmethod
    async def get_by_id(self, location_id: int) -> Location | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[Location]:
        ...

    @abstractmethod
    async def update(self, location: Location) -> Location:
        ...
