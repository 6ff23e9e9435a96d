"""ISP refactored: narrow capabilities, implemented only where they apply."""

from abc import ABC, abstractmethod


class Workable(ABC):
    @abstractmethod
    def work(self) -> None:
        """Do a unit of work."""


class Eatable(ABC):
    @abstractmethod
    def eat(self) -> None:
        """Take a meal break."""


class Robot(Workable):
    def work(self) -> None:
        print("Robô trabalhando")


class Human(Workable, Eatable):
    def work(self) -> None:
        print("Humano trabalhando")

    def eat(self) -> None:
        print("Humano comendo")


def main() -> None:
    worker: Workable = Robot()
    worker.work()

    human = Human()
    human.work()
    human.eat()


if __name__ == "__main__":
    main()
