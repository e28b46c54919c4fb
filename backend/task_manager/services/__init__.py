"""Services — orchestration between API routes and repositories."""
