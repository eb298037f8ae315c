"""userauth: account registration and JWT login over a SQLite credential store."""
