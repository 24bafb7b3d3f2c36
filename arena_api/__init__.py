"""arena-api: data-access layer for users, employees and tournaments."""
