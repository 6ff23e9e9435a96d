"""ISP original: one broad capability forces every worker to eat."""

from abc import ABC, abstractmethod

from solid_principles.domain.core.exceptions import UnsupportedCapabilityError


class Worker(ABC):
    @abstractmethod
    def work(self) -> None:
        """Do a unit of work."""

    @abstractmethod
    def eat(self) -> None:
        """Take a meal break."""


class Robot(Worker):
    def work(self) -> None:
        print("Robô trabalhando")

    def eat(self) -> None:
        # Required by Worker, meaningless for a robot
        raise UnsupportedCapabilityError(type(self).__name__, "eat")


class Human(Worker):
    def work(self) -> None:
        print("Humano trabalhando")

    def eat(self) -> None:
        print("Humano comendo")


def main() -> None:
    worker: Worker = Robot()
    worker.work()

    worker = Human()
    worker.work()
    worker.eat()


if __name__ == "__main__":
    main()
