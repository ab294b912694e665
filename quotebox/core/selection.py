import random
from typing import Any, Callable, List, Optional

from quotebox.storage.models import Quote
from quotebox.storage.store import ALL_CATEGORIES, QuoteStore

NO_QUOTES_MESSAGE = "No quotes in this category."


class EmptySelection(LookupError):
    """No quote matches the requested category."""


def format_quote(quote: Quote) -> str:
    return f'"{quote.text}" - Category: {quote.category}'


def filter_quotes(quotes: List[Quote], category_filter: Optional[str]) -> List[Quote]:
    """Возвращает цитаты выбранной категории; "all" (или пусто) — все цитаты."""

    if not category_filter or category_filter == ALL_CATEGORIES:
        return list(quotes)
    return [q for q in quotes if q.category == category_filter]


def pick_random(
    quotes: List[Quote],
    category_filter: Optional[str],
    rng: Optional[random.Random] = None,
) -> Quote:
    candidates = filter_quotes(quotes, category_filter)
    if not candidates:
        raise EmptySelection(category_filter or ALL_CATEGORIES)
    chooser = rng or random
    return chooser.choice(candidates)


class QuoteSelector:
    """Picks quotes from the store and records what was shown."""

    def __init__(
        self,
        store: QuoteStore,
        display: Callable[[str], Any] = print,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.store = store
        self.display = display
        self.rng = rng

    def pick_random(self, category_filter: Optional[str] = None) -> Quote:
        """Selects a quote and remembers it together with the active filter.

        Raises:
            EmptySelection: nothing matches; no storage writes happen then.
        """

        if category_filter is None:
            category_filter = self.store.last_selected_category()

        quote = pick_random(self.store.quotes, category_filter, self.rng)
        self.store.remember_selected_category(category_filter)
        self.store.remember_last_shown(quote)
        return quote

    def show_random(self, category_filter: Optional[str] = None) -> Optional[Quote]:
        try:
            quote = self.pick_random(category_filter)
        except EmptySelection:
            self.display(NO_QUOTES_MESSAGE)
            return None

        self.display(format_quote(quote))
        return quote

    def show_last(self) -> Optional[Quote]:
        quote = self.store.last_shown()
        if quote is not None:
            self.display(format_quote(quote))
        return quote
