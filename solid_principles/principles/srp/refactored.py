"""SRP refactored: one provider per responsibility."""

from solid_principles.domain.models import User


class UserRepository:
    """Persists users and nothing else."""

    def save(self, user: User) -> None:
        print(f"Salvando usuário: {user.name}, email: {user.email}")


class EmailService:
    """Sends messages to users and nothing else."""

    def send(self, user: User, message: str) -> None:
        print(f"Enviando email para {user.email}: {message}")


def main() -> None:
    user = User(name="João", email="joao@email.com")
    repo = UserRepository()
    email = EmailService()

    repo.save(user)
    email.send(user, "Bem-vindo!")


if __name__ == "__main__":
    main()
