def linear_ease(t):
    return t


def hermite_ease(t):
    t_squared = t * t
    return 3 * t_squared - 2 * t * t_squared


EASINGS = {
    'linear': linear_ease,
    'hermite': hermite_ease,
}


def frame_positions(num_frames, ease='linear'):
    """Blend position of every frame, first frame at 0 and last at 1."""
    easing = EASINGS[ease]
    if num_frames == 1:
        return [easing(0.0)]
    return [easing(i / (num_frames - 1)) for i in range(num_frames)]


def playback_order(num_frames, loop=True, repeat_end_frames=1):
    """Frame indices in the order the animation shows them.

    Looping plays forward, holds the last frame, plays back down to frame
    1 and holds the first frame before the animation wraps around to frame
    0 again. Each hold adds ``repeat_end_frames - 1`` copies.
    """
    order = list(range(num_frames))
    if not loop or num_frames < 2:
        return order

    hold = repeat_end_frames - 1
    order.extend([num_frames - 1] * hold)
    order.extend(range(num_frames - 2, 0, -1))
    order.extend([0] * hold)
    return order
