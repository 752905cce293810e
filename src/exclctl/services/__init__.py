"""Service layer — orchestrates domain rules and returns ServiceResult."""
