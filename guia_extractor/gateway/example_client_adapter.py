"""Offline gateway adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseModelGateway and register the provider in GatewayFactory.
"""

import json
from typing import ClassVar

from guia_extractor.gateway.base import BaseModelGateway
from guia_extractor.processor.models import Prompt


class ExampleGatewayAdapter(BaseModelGateway):
    """Returns a fixed shipment record without any network call.

    Useful for local development of the mobile client and in tests.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "date": "2024-03-01",
        "ruc": "20123456789",
        "extractedData": {
            "fechaLlegada": "2024-03-02",
            "fechaRegistro": "2024-03-01",
            "costoTransporte": "150.00",
            "productos": "10 cajas de cemento",
        },
    }

    def generate(self, prompt: Prompt) -> str:
        _ = prompt
        return "```json\n" + json.dumps(self.DEFAULT_RESPONSE) + "\n```"
