"""Database records for repositories and libraries."""