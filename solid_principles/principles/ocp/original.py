"""OCP original: the discount rule is fixed inside the function."""

from solid_principles.domain.models import Product


def calculate_discount(product: Product) -> float:
    """Return the price with a fixed 10% discount applied."""
    return product.price * 0.9


def main() -> None:
    product = Product(name="Notebook", price=3000)
    discount = calculate_discount(product)
    print(f"Preço com desconto: {discount:.2f}")


if __name__ == "__main__":
    main()
