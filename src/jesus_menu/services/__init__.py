"""Service layer — menu operations returning ServiceResult."""
