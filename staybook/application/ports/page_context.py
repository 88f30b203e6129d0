from abc import ABC, abstractmethod


class PageContextPort(ABC):
    @abstractmethod
    def navigate(self, path: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def current_property_id(self) -> str | None:
        raise NotImplementedError
