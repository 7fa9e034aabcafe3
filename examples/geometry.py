from genfloat import FP32, FP64, Float, from_f64


def rotate(x: Float, y: Float, degrees: Float):
    """Rotate the point (x, y) around the origin."""
    angle = degrees.deg_to_rad()
    c, s = angle.cos(), angle.sin()
    return x * c - y * s, x * s + y * c


def heading(x: Float, y: Float) -> Float:
    """Angle of (x, y) in degrees, in [0, 360)."""
    angle = y.atan2(x)
    if angle < type(angle).zero():
        angle += type(angle).full_turn()
    return angle.rad_to_deg()


for width in (FP32, FP64):
    x, y = from_f64(width, 1.0), from_f64(width, 0.0)
    x, y = rotate(x, y, from_f64(width, 30.0))
    length = (x * x + y * y).sqrt()
    print(width, "rotated:", x, y, "length:", length, "heading:", heading(x, y))
