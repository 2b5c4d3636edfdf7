"""Collision resolution for Breakout.

Handles a moving rectangle (a ball) against a static one (the paddle or
a block): detect the overlap, push the mover out along one axis and send
it back the way it came on that axis.
"""

from models import Rectangle, Vector2D


def resolve_collision(moving: Rectangle, velocity: Vector2D, static: Rectangle) -> bool:
    """Separate `moving` from `static` and bounce `velocity`.

    The axis with the smaller overlap is corrected: a wide, shallow
    overlap is a hit on the top or bottom face, a tall, narrow one a hit
    on a side. When both extents are equal the horizontal axis is used.
    Only one axis is corrected per call.

    The corrected velocity component keeps its magnitude and points away
    from the static rectangle's center. If the centers are aligned on
    that axis the component becomes zero and the position is unchanged.

    Args:
        moving: Rectangle of the moving body, mutated in place
        velocity: Direction of the moving body, mutated in place
        static: Rectangle of the static body (not modified)

    Returns:
        True if the rectangles overlapped (contact occurred)
    """
    intersection = moving.intersect(static)
    if intersection is None:
        return False

    static_center = static.center
    moving_center = moving.center
    to = Vector2D(
        x=static_center.x - moving_center.x,
        y=static_center.y - moving_center.y,
    ).signum()

    if intersection.width > intersection.height:
        # Bounce on y
        moving.y -= to.y * intersection.height
        velocity.y = -to.y * abs(velocity.y)
    else:
        # Bounce on x
        moving.x -= to.x * intersection.width
        velocity.x = -to.x * abs(velocity.x)
    return True
