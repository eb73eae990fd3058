__version__ = '0.1.0'
__author__ = 'blanketsucks'

from .errors import *
from .parser import Components, Grammar
from .resolver import *
from .multidict import *
from .url import *
from .settings import *
from .installer import *
