from .base import Base
from .conversion_rate import ConversionRate
