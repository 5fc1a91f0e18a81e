from __future__ import annotations

from .common import *
from .auth import *
from .accounts import *
from .keys import *
from .metadata import *
from .federation import *
from .trust_marks import *
from .system import *
