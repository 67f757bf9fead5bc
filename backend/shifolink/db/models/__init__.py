# backend/shifolink/db/models/__init__.py

from shifolink.db.models.author import Author
from shifolink.db.models.journal import Journal

from shifolink.db.models.clinic import Clinic
from shifolink.db.models.clinic_branch import ClinicBranch
from shifolink.db.models.doctor_type import DoctorType
from shifolink.db.models.clinic_admin import ClinicAdmin
from shifolink.db.models.doctor import Doctor

from shifolink.db.models.customer import Customer
from shifolink.db.models.queue import Queue

from shifolink.db.models.drug_store import DrugStore
from shifolink.db.models.drug_store_branch import DrugStoreBranch
from shifolink.db.models.drug import Drug
from shifolink.db.models.pharmacist import Pharmacist
from shifolink.db.models.orders import Orders
from shifolink.db.models.order_drug import OrderDrug

from shifolink.db.models.super_admin import SuperAdmin
