"""Guillotine splitting with the Split Shorter Leftover Axis rule.

After a piece is placed in the top-left corner of a free rectangle the
rest of that rectangle is L-shaped. A guillotine cut is a straight,
full-length cut, so the L can only become two rectangles, never three.
The cut runs along the axis with the smaller leftover:

    leftover width <= leftover height (vertical cut)

        +-------+----+
        | piece |    |
        +-------+ R  |
        |   B   |    |
        +-------+----+

    leftover width > leftover height (horizontal cut)

        +-------+---+
        | piece | R |
        +-------+---+
        |     B     |
        +-----------+
"""

from __future__ import annotations

from platecut.domain.value_objects import FreeRectangle


def split_free_rectangle(
    rect: FreeRectangle,
    width: int,
    height: int,
) -> list[FreeRectangle]:
    """Split the space left in ``rect`` after placing a piece at its corner.

    Args:
        rect: The free rectangle consumed by the placement.
        width: As-placed piece width.
        height: As-placed piece height.

    Returns:
        Zero, one or two new free rectangles, in insertion order.
    """
    leftover_w = rect.width - width
    leftover_h = rect.height - height

    right_x = rect.x + width
    below_y = rect.y + height

    if leftover_w > 0 and leftover_h > 0:
        if leftover_w <= leftover_h:
            return [
                FreeRectangle(right_x, rect.y, leftover_w, rect.height),
                FreeRectangle(rect.x, below_y, width, leftover_h),
            ]
        return [
            FreeRectangle(rect.x, below_y, rect.width, leftover_h),
            FreeRectangle(right_x, rect.y, leftover_w, height),
        ]

    if leftover_w > 0:
        return [FreeRectangle(right_x, rect.y, leftover_w, rect.height)]

    if leftover_h > 0:
        return [FreeRectangle(rect.x, below_y, rect.width, leftover_h)]

    return []
