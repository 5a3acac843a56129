from ..models.user import User
from ..models.family import Family
from ..models.member import Member, Gender
from ..db.base_class import Base
