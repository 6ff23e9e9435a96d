"""OCP refactored: new discounts are added as strategies, not edits."""

from abc import ABC, abstractmethod

from solid_principles.domain.models import Product


class DiscountStrategy(ABC):
    """Capability for pricing a product after discount."""

    @abstractmethod
    def apply(self, product: Product) -> float:
        """Return the discounted price."""


class DefaultDiscount(DiscountStrategy):
    """10% off."""

    def apply(self, product: Product) -> float:
        return product.price * 0.9


class SpecialDiscount(DiscountStrategy):
    """20% off."""

    def apply(self, product: Product) -> float:
        return product.price * 0.8


def main() -> None:
    product = Product(name="Notebook", price=3000)
    strategy: DiscountStrategy = DefaultDiscount()
    print(f"Preço com desconto padrão: {strategy.apply(product):.2f}")

    strategy = SpecialDiscount()
    print(f"Preço com desconto especial: {strategy.apply(product):.2f}")


if __name__ == "__main__":
    main()
