"""Default block catalog: the six page-builder blocks a service page can use."""

from cleaning_booking.schemas.block_schema import BlockSchema, BlockType, FieldKind, FieldRule

INTRO = BlockSchema(
    block_type=BlockType.INTRO.value,
    name="Introduction",
    description="Banner at the top of the service page",
    fields={
        "title": FieldRule(FieldKind.TEXT, "Heading (H1)", required=True),
        "banner_image_url": FieldRule(FieldKind.IMAGE, "Banner image", required=True),
    },
    default_data={"title": "House cleaning service", "banner_image_url": ""},
)

DEFINITION = BlockSchema(
    block_type=BlockType.DEFINITION.value,
    name="Description / Benefits",
    description="Detailed introductory text",
    fields={
        "title": FieldRule(FieldKind.TEXT, "Section title", required=True),
        "content": FieldRule(FieldKind.RICHTEXT, "Content (HTML)", required=True),
    },
    default_data={"title": "About the service", "content": "<p>Detailed description...</p>"},
)

PRICING = BlockSchema(
    block_type=BlockType.PRICING.value,
    name="Price list",
    description="Service price table",
    fields={
        "service_title": FieldRule(FieldKind.TEXT, "Price table name", required=True),
        "note": FieldRule(FieldKind.TEXTAREA, "General note"),
        "subservices": FieldRule(
            FieldKind.ARRAY,
            "Packages",
            required=True,
            min_items=1,
            item_schema={
                "id": FieldRule(FieldKind.TEXT, "Package ID", required=True),
                "subservice_title": FieldRule(FieldKind.TEXT, "Package name", required=True),
                "price": FieldRule(FieldKind.NUMBER, "Price (VND)", required=True, min=0),
            },
        ),
    },
    default_data={"service_title": "Service prices", "subservices": []},
)

TASK_TAB = BlockSchema(
    block_type=BlockType.TASK_TAB.value,
    name="Task tabs",
    description="Tabbed content per room or task",
    fields={
        "title": FieldRule(FieldKind.TEXT, "Overall title", required=True),
        "tabs": FieldRule(
            FieldKind.ARRAY,
            "Tabs",
            required=True,
            min_items=1,
            item_schema={
                "tab_title": FieldRule(FieldKind.TEXT, "Tab name", required=True),
                "description": FieldRule(FieldKind.RICHTEXT, "Content", required=True),
                "image_url": FieldRule(FieldKind.IMAGE, "Image", required=True),
            },
        ),
    },
    default_data={"title": "Work details", "tabs": []},
)

PROCESS = BlockSchema(
    block_type=BlockType.PROCESS.value,
    name="Process",
    description="Step-by-step process timeline",
    fields={
        "title": FieldRule(FieldKind.TEXT, "Process title", required=True),
        "steps": FieldRule(
            FieldKind.ARRAY,
            "Steps",
            required=True,
            min_items=1,
            item_schema={
                "number": FieldRule(FieldKind.NUMBER, "Step number", required=True, min=1),
                "step_title": FieldRule(FieldKind.TEXT, "Step name", required=True),
                "description": FieldRule(FieldKind.TEXTAREA, "Description", required=True),
                "image_url": FieldRule(FieldKind.IMAGE, "Image", required=True),
            },
        ),
    },
    default_data={"title": "How we work", "steps": []},
)

BOOKING = BlockSchema(
    block_type=BlockType.BOOKING.value,
    name="Booking form",
    description="Booking block with a configurable form",
    fields={
        "title": FieldRule(FieldKind.TEXT, "Title", required=True),
        "image_url": FieldRule(FieldKind.IMAGE, "Background image", required=True),
        "button_text": FieldRule(FieldKind.TEXT, "Button text", default="Book now"),
        "form_schema": FieldRule(
            FieldKind.ARRAY,
            "Form fields",
            required=True,
            item_schema={
                "field_name": FieldRule(FieldKind.TEXT, "Field name (DB)", required=True),
                "field_type": FieldRule(
                    FieldKind.SELECT,
                    "Field type",
                    required=True,
                    options=("text", "select", "date", "time"),
                ),
                "label": FieldRule(FieldKind.TEXT, "Display label", required=True),
                "required": FieldRule(FieldKind.BOOLEAN, "Required?", default=False),
                "options": FieldRule(FieldKind.ARRAY, "Options (for select)"),
            },
        ),
    },
    default_data={
        "title": "Book now",
        "image_url": "",
        "button_text": "Book now",
        "form_schema": [],
    },
)

DEFAULT_SCHEMAS: tuple[BlockSchema, ...] = (
    INTRO,
    DEFINITION,
    PRICING,
    TASK_TAB,
    PROCESS,
    BOOKING,
)
