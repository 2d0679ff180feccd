"""Application layer: DTOs, interfaces, services, and the service context.

Depends on domain and protocol definitions. Infrastructure implements
the store interface.
"""
