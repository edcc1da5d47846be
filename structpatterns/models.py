from dataclasses import asdict, dataclass
from typing import Dict


@dataclass(frozen=True)
class ClientData:
    full_name: str
    address: str
    phone_number: str
    email: str

    def display(self) -> str:
        text = "\n".join([
            "Client Information:",
            f"Name: {self.full_name}",
            f"Address: {self.address}",
            f"Phone: {self.phone_number}",
            f"Email: {self.email}",
        ])
        print(text)
        return text

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class ExternalClientData1:
    name: str
    residence: str
    contact_number: str
    mail: str


@dataclass(frozen=True)
class ExternalClientData2:
    first_name: str
    last_name: str
    postal_address: str
    phone: str
    email_address: str
