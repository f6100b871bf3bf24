from .company_schemas import CompanyIn, CompanyOut

__all__ = ["CompanyIn", "CompanyOut"]
