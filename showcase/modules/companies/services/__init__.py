from .company_service import CompanyService, COMPANY_NOT_FOUND, COMPANY_CONFLICT

__all__ = ["CompanyService", "COMPANY_NOT_FOUND", "COMPANY_CONFLICT"]
