from mimeparse.accept import *
from mimeparse.accept import __all__
