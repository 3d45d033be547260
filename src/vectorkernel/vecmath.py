import math

# ---------------------------
# component-level 2D helpers
# ---------------------------

def dot(ax:float, ay:float, bx:float, by:float) -> float:
    """Dot product a·b."""
    return ax*bx + ay*by

def length_squared(x:float, y:float) -> float:
    return x*x + y*y

def length(x:float, y:float) -> float:
    """Euclidean norm |(x, y)|."""
    return math.sqrt(x*x + y*y)

def distance_squared(ax:float, ay:float, bx:float, by:float) -> float:
    dx = bx - ax
    dy = by - ay
    return dx*dx + dy*dy

def distance(ax:float, ay:float, bx:float, by:float) -> float:
    """Distance between points a and b."""
    return math.sqrt(distance_squared(ax, ay, bx, by))

def lerp(a:float, b:float, t:float) -> float:
    """Linear interpolation a + (b - a)·t.

    At t == 1 the result is exactly b; the subtraction form alone can
    miss b by an ulp when a and b differ greatly in magnitude.
    """
    if t == 1:
        return b
    return a + (b - a)*t

def clamp(v:float, lo:float, hi:float) -> float:
    if lo > hi:
        raise ValueError(f"clamp bounds are inverted: min={lo} > max={hi}")
    return max(lo, min(hi, v))

def clamp01(t:float) -> float:
    """Clamp t into [0, 1]."""
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    return t

def smooth_step(t:float) -> float:
    """Cubic Hermite smoothing 3t² - 2t³ of t clamped to [0, 1]."""
    t = clamp01(t)
    return t*t*(3 - 2*t)
