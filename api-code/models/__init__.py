from .company import CompanyProfile, CompanyProfileError, load_company_profile
from .message import Message, Sender, utc_now

__all__ = [
    "CompanyProfile",
    "CompanyProfileError",
    "load_company_profile",
    "Message",
    "Sender",
    "utc_now",
]
