"""Statistical data generation and summary modules."""

from . import data_generation as data_generation
from . import irt as irt
from . import trends as trends
