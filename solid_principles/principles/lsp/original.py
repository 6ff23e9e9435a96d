"""LSP original: two interchangeable speakers behind one capability."""

from abc import ABC, abstractmethod


class Animal(ABC):
    @abstractmethod
    def speak(self) -> str:
        """Return the sound the animal makes."""


class Dog(Animal):
    def speak(self) -> str:
        return "Au au!"


class Cat(Animal):
    def speak(self) -> str:
        return "Miau!"


def make_animal_speak(animal: Animal) -> None:
    print(animal.speak())


def main() -> None:
    animal: Animal = Dog()
    make_animal_speak(animal)

    animal = Cat()
    make_animal_speak(animal)


if __name__ == "__main__":
    main()
