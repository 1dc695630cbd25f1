class PriceFormatter:
    """
    Renders a stored price for display, e.g. PriceFormatter("{price} EUR").

    The template is checked once at construction so a bad PRICE_TEMPLATE
    fails at startup rather than on the first request.
    """

    def __init__(self, template: str):
        try:
            template.format(price=0)
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(f"Invalid price template {template!r}: {e}") from e
        self.template = template

    def format(self, price: int) -> str:
        return self.template.format(price=price)
