"""Grouping of alternating day/night periods into day cards."""

from collections.abc import Sequence

from forecastview.models.forecast import DayCard, ForecastPeriod


def group_periods(periods: Sequence[ForecastPeriod], max_days: int) -> list[DayCard]:
    """Pair each daytime period with the night that follows it.

    A period that cannot be paired (the sequence opens at night, two days
    in a row, a trailing period) gets a card of its own. Only day/night
    pairs count toward `max_days`, so a lone leading "Tonight" card does
    not cost a day. The first card is labelled "Today", or "Tonight" when
    it holds only a night; later cards take their period's name.
    """
    if max_days < 1:
        raise ValueError("max_days must be at least 1")

    cards: list[DayCard] = []
    days = 0
    i = 0
    n = len(periods)
    while i < n and days < max_days:
        cur = periods[i]
        nxt = periods[i + 1] if i + 1 < n else None

        if cur.is_daytime and nxt is not None and not nxt.is_daytime:
            day, night = cur, nxt
            days += 1
            i += 2
        elif cur.is_daytime:
            day, night = cur, None
            i += 1
        else:
            day, night = None, cur
            i += 1

        if not cards:
            label = "Today" if day is not None else "Tonight"
        else:
            label = day.name if day is not None else night.name
        cards.append(DayCard(label=label, day=day, night=night))

    return cards
