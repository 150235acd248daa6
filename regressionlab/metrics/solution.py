"""
Metric solution types.
"""

from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class MetricSet:
    """
    All four error metrics for one (slope, intercept) candidate.

    Attributes:
        mse: Mean squared error
        rmse: Root mean squared error, always sqrt(mse)
        mae: Mean absolute error
        r2: Coefficient of determination (0 for degenerate data)
    """
    mse: float
    rmse: float
    mae: float
    r2: float

    def to_dict(self) -> dict[str, float]:
        return asdict(self)

    def summary(self) -> str:
        return "\n".join([
            f"MSE:  {self.mse:.6f}",
            f"RMSE: {self.rmse:.6f}",
            f"MAE:  {self.mae:.6f}",
            f"R²:   {self.r2:.6f}",
        ])
