"""Record types exchanged with the storage and API layers.

Dataclass attributes are snake_case; ``to_dict``/``from_dict`` translate to and
from the camelCase JSON records kept by storage.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Mapping, Optional

from .enums import ContractStatus

CONTACT_FIELDS = {
    "email": "email",
    "phone": "phone",
    "address": "address",
    "website": "website",
    "contact_person": "contactPerson",
}


@dataclass
class ContactInfo:
    """Contact details of the counterparty; every field is optional."""

    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    website: Optional[str] = None
    contact_person: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ContactInfo":
        return cls(**{attr: data.get(key) for attr, key in CONTACT_FIELDS.items()})

    def to_dict(self) -> Dict[str, str]:
        out = {}
        for attr, key in CONTACT_FIELDS.items():
            value = getattr(self, attr)
            if value is not None:
                out[key] = value
        return out


@dataclass
class Contract:
    """A recurring contract in the current record schema.

    Attributes:
        id: Storage identifier
        contract_id: Externally visible contract reference
        start_date: First payment / start date ('YYYY-MM-DD')
        end_date: Optional last day payments may fall on
        pay_date: Last known or derived next-payment date
        frequency: Wire value of a ``Frequency`` (e.g. 'monthly')
        status: Canonical status; never 'pending' or 'draft'
        category: Category name, 'other' when unknown
        contact_info: Always present, possibly empty
    """

    contract_id: str
    name: str
    company: str
    start_date: str
    amount: float
    currency: str
    frequency: str
    status: ContractStatus
    category: str
    id: str = ""
    description: Optional[str] = None
    end_date: Optional[str] = None
    pay_date: Optional[str] = None
    contact_info: ContactInfo = field(default_factory=ContactInfo)
    notes: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    attachments: List[Any] = field(default_factory=list)
    document_link: Optional[str] = None
    custom_fields: Dict[str, Any] = field(default_factory=dict)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Contract":
        """Build a Contract from a record already in canonical shape."""
        return cls(
            id=data.get("id") or "",
            contract_id=data.get("contractId"),
            name=data.get("name"),
            company=data.get("company"),
            description=data.get("description"),
            start_date=data.get("startDate"),
            end_date=data.get("endDate"),
            pay_date=data.get("payDate"),
            amount=data.get("amount"),
            currency=data.get("currency"),
            frequency=data.get("frequency"),
            status=ContractStatus(data.get("status")),
            category=data.get("category"),
            contact_info=ContactInfo.from_dict(data.get("contactInfo") or {}),
            notes=data.get("notes"),
            tags=list(data.get("tags") or []),
            attachments=list(data.get("attachments") or []),
            document_link=data.get("documentLink"),
            custom_fields=dict(data.get("customFields") or {}),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Canonical JSON-compatible record; unset optional fields are omitted."""
        record = {
            "id": self.id,
            "contractId": self.contract_id,
            "name": self.name,
            "company": self.company,
            "description": self.description,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "payDate": self.pay_date,
            "amount": self.amount,
            "currency": self.currency,
            "frequency": self.frequency,
            "status": self.status.value,
            "category": self.category,
            "contactInfo": self.contact_info.to_dict(),
            "notes": self.notes,
            "tags": list(self.tags),
            "attachments": list(self.attachments),
            "documentLink": self.document_link,
            "customFields": dict(self.custom_fields),
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
        return {key: value for key, value in record.items() if value is not None}


@dataclass
class PaymentDate:
    """A projected payment; never persisted."""

    date: date
    amount: float
    currency: str
    is_next: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "amount": self.amount,
            "currency": self.currency,
            "isNext": self.is_next,
        }


@dataclass
class MigrationResult:
    contract: Contract
    was_migrated: bool
    migration_notes: List[str] = field(default_factory=list)


@dataclass
class MigrationSummary:
    total: int
    migrated: int
    unchanged: int
    migration_notes: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "migrated": self.migrated,
            "unchanged": self.unchanged,
            "migrationNotes": list(self.migration_notes),
        }
