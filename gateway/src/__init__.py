"""Edge gateway: first stage of the CEP temperature pipeline.

Accepts ``{"cep": "..."}``, validates it and relays the resolution
service's answer to the client.
"""

__version__ = "1.0.0"
