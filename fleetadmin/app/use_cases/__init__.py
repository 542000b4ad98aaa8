"""
Use Cases

Organized into domain folders:
- admins/: Company admin authentication and management
- companies/: Tenant lifecycle
- modules/: Module catalog and assignments
- drivers/: Driver management and performance
- shifts/: Driver shift history
- users/: End user authentication and management

Import from subdirectories.
"""
