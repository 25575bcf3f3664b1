"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Services load documents through repositories, apply the mutation rules
    of their aggregate and write the documents back.
    """

    pass
