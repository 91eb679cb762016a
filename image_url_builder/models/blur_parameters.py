from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class BlurParameters:
    """
    Gaussian blur request.

    radius is required; sigma is written to the URL only when supplied.
    """
    radius: float
    sigma: Optional[float] = None
