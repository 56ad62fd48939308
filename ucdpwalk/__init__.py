# ====================================================================================== #
# Module for walking through UCDP conflict data.
# ====================================================================================== #
from .data import UCDPPRIO, GED
from .utils import *
from . import clean
from . import summary
from . import pipeline as pipe
from . import plot as pplot
