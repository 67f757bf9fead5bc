"""
Entity catalogue.

Each ``EntityDescriptor`` tells the generic repository, service and router
everything that differs between entity types: the table, the request shapes,
which columns the list search matches and whether the entity holds a
password.
"""

from dataclasses import dataclass

from pydantic import BaseModel

from shifolink.db.base import Base
from shifolink.db.models import (
    Author,
    Clinic,
    ClinicAdmin,
    ClinicBranch,
    Customer,
    Doctor,
    DoctorType,
    Drug,
    DrugStore,
    DrugStoreBranch,
    Journal,
    OrderDrug,
    Orders,
    Pharmacist,
    Queue,
    SuperAdmin,
)
from shifolink.schemas import accounts, clinics, journals, pharmacy

NAME_SEARCH = ("first_name", "last_name")


@dataclass(frozen=True)
class EntityDescriptor:
    # Route segment and log label, e.g. "clinic_branch".
    name: str
    model: type[Base]
    create_schema: type[BaseModel]
    update_schema: type[BaseModel]
    # Columns matched case-insensitively (OR) by the list search.
    search_fields: tuple[str, ...]
    # Account-bearing entities store a password and expose PATCH.
    account: bool = False

    @property
    def table(self):
        return self.model.__table__


ENTITIES: tuple[EntityDescriptor, ...] = (
    EntityDescriptor("author", Author, accounts.AuthorCreate, accounts.AuthorUpdate, NAME_SEARCH, account=True),
    EntityDescriptor("clinic", Clinic, clinics.ClinicCreate, clinics.ClinicUpdate, ("name",)),
    EntityDescriptor(
        "clinic_admin",
        ClinicAdmin,
        accounts.ClinicAdminCreate,
        accounts.ClinicAdminUpdate,
        NAME_SEARCH,
        account=True,
    ),
    EntityDescriptor(
        "clinic_branch",
        ClinicBranch,
        clinics.ClinicBranchCreate,
        clinics.ClinicBranchUpdate,
        ("address", "phone"),
    ),
    EntityDescriptor("customer", Customer, accounts.CustomerCreate, accounts.CustomerUpdate, NAME_SEARCH, account=True),
    EntityDescriptor("doctor", Doctor, accounts.DoctorCreate, accounts.DoctorUpdate, NAME_SEARCH, account=True),
    EntityDescriptor("doctor_type", DoctorType, clinics.DoctorTypeCreate, clinics.DoctorTypeUpdate, ("name",)),
    EntityDescriptor("drug", Drug, pharmacy.DrugCreate, pharmacy.DrugUpdate, ("name", "description")),
    EntityDescriptor(
        "drug_store",
        DrugStore,
        pharmacy.DrugStoreCreate,
        pharmacy.DrugStoreUpdate,
        ("name", "description"),
    ),
    EntityDescriptor(
        "drug_store_branch",
        DrugStoreBranch,
        pharmacy.DrugStoreBranchCreate,
        pharmacy.DrugStoreBranchUpdate,
        ("address", "phone"),
    ),
    EntityDescriptor("journal", Journal, journals.JournalCreate, journals.JournalUpdate, ("theme", "article")),
    EntityDescriptor(
        "order_drug",
        OrderDrug,
        pharmacy.OrderDrugCreate,
        pharmacy.OrderDrugUpdate,
        ("drug_id", "orders_id"),
    ),
    EntityDescriptor(
        "orders",
        Orders,
        pharmacy.OrdersCreate,
        pharmacy.OrdersUpdate,
        ("pharmacist_id", "customer_id"),
    ),
    EntityDescriptor(
        "pharmacist",
        Pharmacist,
        accounts.PharmacistCreate,
        accounts.PharmacistUpdate,
        NAME_SEARCH,
        account=True,
    ),
    EntityDescriptor("queue", Queue, clinics.QueueCreate, clinics.QueueUpdate, ("queue_number",)),
    EntityDescriptor(
        "super_admin",
        SuperAdmin,
        accounts.SuperAdminCreate,
        accounts.SuperAdminUpdate,
        NAME_SEARCH,
        account=True,
    ),
)

ENTITIES_BY_NAME: dict[str, EntityDescriptor] = {entity.name: entity for entity in ENTITIES}
