"""Service layer — operations returning ServiceResult for every interface."""
