from __future__ import annotations

from collections.abc import Sequence

from ..restaurants.models import RestaurantOption

OPTIONS_HEADER = "Here are some options:"
CLOSING_INSTRUCTION = "Please provide a friendly recommendation based on the above options."


def _format_reviews(reviews: Sequence[str]) -> str:
    # [Great food! Excellent service!]
    return "[" + " ".join(reviews) + "]"


def _format_restaurant(r: RestaurantOption) -> str:
    return (
        f"- {r.name} at {r.address}, Price: ${r.price:.2f}, Rating: {r.rating:.1f}, "
        f"Distance: {r.distance_miles:.1f} miles. Reviews: {_format_reviews(r.reviews)}"
    )


def build_prompt(
    location: str,
    query: str | None,
    restaurants: Sequence[RestaurantOption],
) -> str:
    """Render the user's request and the candidate restaurants into a single prompt."""
    prompt = f"User is looking for restaurants near {location}"
    if query:
        prompt += f" with query '{query}'."
    else:
        prompt += "."

    lines = [prompt, OPTIONS_HEADER]
    lines.extend(_format_restaurant(r) for r in restaurants)
    lines.append("")
    lines.append(CLOSING_INSTRUCTION)
    return "\n".join(lines)
