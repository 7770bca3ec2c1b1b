from .user import User
from .chirp import Chirp
