"""DIP refactored: the service depends on a repository abstraction."""

from abc import ABC, abstractmethod


class Repository(ABC):
    """Persistence capability required by UserService."""

    @abstractmethod
    def save(self, data: str) -> None:
        """Persist a single value."""


class MySQLRepository(Repository):
    def save(self, data: str) -> None:
        print(f"Salvando '{data}' no MySQL")


class UserService:
    """Registers users through whatever Repository it is given."""

    def __init__(self, repo: Repository):
        self.repo = repo

    def register(self, name: str) -> None:
        self.repo.save(name)


def main() -> None:
    repo = MySQLRepository()
    service = UserService(repo=repo)
    service.register("Maria")


if __name__ == "__main__":
    main()
