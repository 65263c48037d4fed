"""Infrastructure layer: SQLite persistence via SQLAlchemy Core.

Row mappers translate between table rows and domain values; everything
read back from storage goes through the validating domain constructors.
This layer must never import from services, commands, or output.
"""
