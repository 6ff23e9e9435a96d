"""DIP original: the service is bound to a concrete repository."""

from typing import Optional

from solid_principles.domain.core.exceptions import ValidationError


class MySQLRepository:
    def save(self, data: str) -> None:
        print(f"Salvando '{data}' no MySQL")


class UserService:
    """Registers users straight into MySQL."""

    def __init__(self, repo: Optional[MySQLRepository] = None):
        if repo is None:
            repo = MySQLRepository()
        if not isinstance(repo, MySQLRepository):
            raise ValidationError(
                "UserService requires a MySQLRepository",
                {"repository": type(repo).__name__},
            )
        self.repo = repo

    def register(self, name: str) -> None:
        self.repo.save(name)


def main() -> None:
    repo = MySQLRepository()
    service = UserService(repo=repo)
    service.register("Maria")


if __name__ == "__main__":
    main()
