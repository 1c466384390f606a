"""Show the database URL without its password.

``petstore db upgrade`` echoes the target database before asking for
confirmation and ``petstore db status`` prints it; both go through
:func:`sanitize_url`. Only the password field is masked: credentials passed
as query parameters are shown as given.
"""

from sqlalchemy.engine import make_url


def sanitize_url(url: str) -> str:
    """``postgresql+psycopg://clerk:s3cr3t@db/petstore`` -> ``...clerk:***@db/petstore``."""
    return make_url(url).render_as_string(hide_password=True)
