"""UserDesk - user management with a validating service layer over SQLAlchemy."""
