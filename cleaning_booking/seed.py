"""Reference services and cleaners used by the console demo and tests."""

import logging
from typing import Any

from cleaning_booking.schemas.booking_schema import Service, Worker, WorkerStatus
from cleaning_booking.store import InMemoryStore

logger = logging.getLogger(__name__)

IMAGE_BASE = "https://res.cloudinary.com/dxtwiciz0/image/upload/cleaning-service"

HOME_CLEANING_LAYOUT: list[dict[str, Any]] = [
    {
        "type": "intro",
        "order": 0,
        "data": {
            "title": "Home Cleaning Service",
            "banner_image_url": f"{IMAGE_BASE}/home-banner.jpg",
        },
    },
    {
        "type": "pricing",
        "order": 1,
        "data": {
            "service_title": "Cleaning Packages",
            "note": "Prices include VAT. The final cost may vary with the condition of your home.",
            "subservices": [
                {"id": "2br", "subservice_title": "2-Bedroom Apartment", "price": 400000},
                {"id": "3br", "subservice_title": "3-Bedroom Apartment", "price": 550000},
            ],
        },
    },
    {
        "type": "task_tab",
        "order": 2,
        "data": {
            "title": "Detailed Work Items",
            "tabs": [
                {
                    "tab_title": "Living Room",
                    "image_url": f"{IMAGE_BASE}/living-room.jpg",
                    "description": "<ul><li>Sweep and mop floors.</li><li>Dust all surfaces.</li></ul>",
                },
                {
                    "tab_title": "Kitchen",
                    "image_url": f"{IMAGE_BASE}/kitchen.jpg",
                    "description": "<ul><li>Clean stovetop and backsplash.</li><li>Sanitize sink.</li></ul>",
                },
            ],
        },
    },
    {
        "type": "booking",
        "order": 3,
        "data": {
            "title": "Get a Quote",
            "button_text": "Submit Request",
            "image_url": f"{IMAGE_BASE}/booking.jpg",
            "form_schema": [
                {"field_name": "name", "field_type": "text", "label": "Name", "required": True},
                {"field_name": "address", "field_type": "text", "label": "Address", "required": True},
                {"field_name": "phone", "field_type": "text", "label": "Phone number", "required": True},
                {
                    "field_name": "subservice_id",
                    "field_type": "select",
                    "label": "Select Package",
                    "required": True,
                    "options": ["2br", "3br"],
                },
                {"field_name": "booking_date", "field_type": "date", "label": "Cleaning Date", "required": True},
                {"field_name": "booking_time", "field_type": "time", "label": "Cleaning Time", "required": True},
            ],
        },
    },
]

HOUSE_MOVING_LAYOUT: list[dict[str, Any]] = [
    {
        "type": "intro",
        "order": 0,
        "data": {
            "title": "House Moving Service",
            "banner_image_url": f"{IMAGE_BASE}/moving-banner.jpg",
        },
    },
    {
        "type": "pricing",
        "order": 1,
        "data": {
            "service_title": "Vehicle Pricing",
            "note": "Vehicle prices cover transportation only and exclude loading labor.",
            "subservices": [
                {"id": "truck_0t5", "subservice_title": "500kg Truck", "price": 350000},
                {"id": "truck_1t5", "subservice_title": "1.5 Ton Truck", "price": 800000},
                {"id": "truck_2t", "subservice_title": "2 Ton Truck", "price": 1200000},
            ],
        },
    },
    {
        "type": "process",
        "order": 2,
        "data": {
            "title": "Standard House Moving Process",
            "steps": [
                {
                    "number": 1,
                    "step_title": "Packing & Sorting",
                    "description": "Belongings are sorted and packed into specialized boxes.",
                    "image_url": f"{IMAGE_BASE}/packing.jpg",
                },
                {
                    "number": 2,
                    "step_title": "Safe Transportation",
                    "description": "Closed-box trucks with experienced drivers.",
                    "image_url": f"{IMAGE_BASE}/transport.jpg",
                },
                {
                    "number": 3,
                    "step_title": "Inspection & Handover",
                    "description": "Items are checked against the inventory list at the new home.",
                    "image_url": f"{IMAGE_BASE}/handover.jpg",
                },
            ],
        },
    },
    {
        "type": "booking",
        "order": 3,
        "data": {
            "title": "Get a Quote",
            "button_text": "Submit Request",
            "image_url": f"{IMAGE_BASE}/booking.jpg",
            "form_schema": [
                {"field_name": "name", "field_type": "text", "label": "Name", "required": True},
                {"field_name": "from_address", "field_type": "text", "label": "Pickup Address", "required": True},
                {"field_name": "to_address", "field_type": "text", "label": "Drop-off Address", "required": True},
                {"field_name": "booking_date", "field_type": "date", "label": "Moving Date", "required": True},
                {"field_name": "booking_time", "field_type": "time", "label": "Moving Time", "required": True},
                {"field_name": "phone", "field_type": "text", "label": "Phone Number", "required": True},
                {
                    "field_name": "subservice_id",
                    "field_type": "select",
                    "label": "Vehicle Type",
                    "required": True,
                    "options": ["truck_0t5", "truck_1t5", "truck_2t"],
                },
            ],
        },
    },
]

HOME_CLEANING = Service(
    id=1,
    name="Home Cleaning",
    description="Home cleaning service",
    base_price=150000,
    duration_minutes=120,
    layout_config=HOME_CLEANING_LAYOUT,
)

HOUSE_MOVING = Service(
    id=2,
    name="Full-package House Moving",
    description="Fast & affordable full-service house moving",
    base_price=500000,
    duration_minutes=300,
    layout_config=HOUSE_MOVING_LAYOUT,
)

CLEANERS: list[Worker] = [
    Worker(id=1, name="Nguyen Van A", phone="0900000001", email="cleaner1@test.com"),
    Worker(id=2, name="Tran Thi B", phone="0900000002", email="cleaner2@test.com"),
    Worker(
        id=3, name="Le Van C", phone="0900000003", email="cleaner3@test.com",
        status=WorkerStatus.ON_LEAVE,
    ),
]


def seed_store(store: InMemoryStore) -> InMemoryStore:
    """Load the reference services and cleaners into ``store``."""
    for service in (HOME_CLEANING, HOUSE_MOVING):
        store.add_service(service)
    for worker in CLEANERS:
        store.add_worker(worker)
    logger.info("Seeded %d services and %d cleaners", 2, len(CLEANERS))
    return store
