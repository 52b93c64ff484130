"""Access control data model: users, roles and permissions."""
