"""Running covariance between two streams."""
from .base import Bivariate
from .summary import Mean


class Covariance(Bivariate):
    """
    Running covariance (Schubert & Gertz, 2018).

    Args:
        ddof: Delta degrees of freedom. The divisor is ``max(1, n - ddof)``.

    Example:
        cov = Covariance()
        for x, y in zip([-2.1, -1.0, 4.3], [3.0, 1.1, 0.12]):
            cov.update(x, y)
        cov.get()  # -4.286
    """

    def __init__(self, ddof: int = 1):
        self.ddof = ddof
        self.mean_x = Mean()
        self.mean_y = Mean()
        self.c = 0.0
        self.cov = 0.0

    def update(self, x: float, y: float) -> None:
        dx = x - self.mean_x.get()
        self.mean_x.update(x)
        self.mean_y.update(y)
        self.c += dx * (y - self.mean_y.get())
        self.cov = self.c / max(1, self.mean_x.n - self.ddof)

    def get(self) -> float:
        return self.cov
