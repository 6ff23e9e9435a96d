"""SRP original: persistence and notification handled side by side on one record."""

from solid_principles.domain.models import User


def save_user(user: User) -> None:
    """Simulate persisting the user."""
    print(f"Salvando usuário: {user.name}, email: {user.email}")


def send_email(user: User, message: str) -> None:
    """Simulate sending an email to the user."""
    print(f"Enviando email para {user.email}: {message}")


def main() -> None:
    user = User(name="João", email="joao@email.com")
    save_user(user)
    send_email(user, "Bem-vindo!")


if __name__ == "__main__":
    main()
