"""
Rodrise School Management Backend — ORM Models
===============================================

Importing this package registers every table with `Base.metadata`, which
Alembic autogenerate and the test fixtures rely on. It also makes every
class available to the string-based relationship() targets.
"""

from app.models.academic_year import AcademicYear
from app.models.fee_structure import FeeStructure
from app.models.fee_type import FeeFrequency, FeeType
from app.models.payment import FeePayment, PaymentDetail
from app.models.payment_method import PaymentMethod
from app.models.school_class import SchoolClass
from app.models.student import Student, StudentStatus
from app.models.user import User, UserRole

__all__ = [
    "AcademicYear",
    "FeeFrequency",
    "FeePayment",
    "FeeStructure",
    "FeeType",
    "PaymentDetail",
    "PaymentMethod",
    "SchoolClass",
    "Student",
    "StudentStatus",
    "User",
    "UserRole",
]
