# File: vidshare/core/database/base.py

from sqlalchemy.orm import declarative_base

# Declarative registry for the `videos` and `share_links` tables.
Base = declarative_base()
