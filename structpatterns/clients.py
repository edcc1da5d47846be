import logging
from abc import ABC, abstractmethod

from .models import ClientData, ExternalClientData1, ExternalClientData2

logger = logging.getLogger("structpatterns.clients")


class ClientDataAdapter(ABC):
    @abstractmethod
    def convert(self) -> ClientData:
        ...


class ExternalClientData1Adapter(ClientDataAdapter):
    def __init__(self, ext_data: ExternalClientData1):
        self.ext_data = ext_data

    def convert(self) -> ClientData:
        ext = self.ext_data
        client = ClientData(
            full_name=ext.name,
            address=ext.residence,
            phone_number=ext.contact_number,
            email=ext.mail,
        )
        logger.info("converted client from system 1: %s", client.full_name)
        return client


class ExternalClientData2Adapter(ClientDataAdapter):
    def __init__(self, ext_data: ExternalClientData2):
        self.ext_data = ext_data

    def convert(self) -> ClientData:
        ext = self.ext_data
        client = ClientData(
            full_name=f"{ext.first_name} {ext.last_name}",
            address=ext.postal_address,
            phone_number=ext.phone,
            email=ext.email_address,
        )
        logger.info("converted client from system 2: %s", client.full_name)
        return client
