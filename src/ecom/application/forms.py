"""Admin entity forms.

A form binds a pydantic schema to the editable fields of one record and
submits create / update / delete requests to the admin API over HTTP.
Outcomes are reported through a ``Toaster`` and the form then navigates
back to the listing page through a ``Navigator``.

The form works in one of two modes, picked by ``initial_data``:

- create mode (no initial data): POST to ``/api/{store_id}/{resource}``
- edit mode: PATCH / DELETE ``/api/{store_id}/{resource}/{id}``

While a request is in flight ``loading`` is set and further submits or
deletes are ignored, the way a disabled button would ignore clicks.
Deleting is a two-step affair: ``request_delete()`` opens the
confirmation modal and ``confirm_delete()`` sends the request.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, ClassVar

import httpx
import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ecom.application.feedback import Navigator, Toaster
from ecom.domain.model.value_objects import HEX_PREFIX
from ecom.utils.logger import get_logger

logger = get_logger(__name__)

GENERIC_FAILURE = "Something went wrong please try again"


# --- Schemas ------------------------------------------------------------------


class FormSchema(BaseModel):
    """Field values travel camelCase on the wire; snake_case is accepted too."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class ColorFormValues(FormSchema):
    name: str = Field(min_length=1)
    value: str = Field(min_length=4)

    @field_validator("value")
    @classmethod
    def _must_be_hex_code(cls, value: str) -> str:
        if not HEX_PREFIX.match(value):
            raise ValueError("String must be a valid hexcode")
        return value


class SizeFormValues(FormSchema):
    name: str = Field(min_length=1)
    value: str = Field(min_length=1)


class BillboardFormValues(FormSchema):
    label: str = Field(min_length=1)
    image_url: str = Field(min_length=1)


class CategoryFormValues(FormSchema):
    name: str = Field(min_length=1)
    billboard_id: str = Field(min_length=1)


class ImageValue(FormSchema):
    url: str = Field(min_length=1)


class ProductFormValues(FormSchema):
    name: str = Field(min_length=1)
    images: list[ImageValue] = Field(min_length=1)
    price: Decimal = Field(ge=1)
    category_id: str = Field(min_length=1)
    color_id: str = Field(min_length=1)
    size_id: str = Field(min_length=1)
    is_featured: bool = False
    is_archived: bool = False


def _wire_key(key: str) -> str:
    return to_camel(key) if "_" in key else key


def _json_body(response: httpx.Response) -> dict[str, Any] | None:
    """The saved record, or None when the server answered without JSON."""
    try:
        return response.json()
    except ValueError:
        logger.warning(f"{response.request.method} {response.request.url} returned a non-JSON body")
        return None


def field_errors(exc: pydantic.ValidationError) -> dict[str, str]:
    """First message per field, keyed by the dotted field path."""
    errors: dict[str, str] = {}
    for error in exc.errors():
        path = ".".join(str(part) for part in error["loc"]) or "__root__"
        if error["type"] == "value_error":
            message = str(error["ctx"]["error"])
        else:
            message = error["msg"]
        errors.setdefault(path, message)
    return errors


# --- Forms --------------------------------------------------------------------


class EntityForm:
    """Base class; subclasses only declare what differs per resource."""

    schema: ClassVar[type[FormSchema]]
    resource: ClassVar[str]
    noun: ClassVar[str]
    defaults: ClassVar[dict[str, Any]]
    delete_failure: ClassVar[str] = GENERIC_FAILURE

    def __init__(
        self,
        client: httpx.Client,
        store_id: str,
        toaster: Toaster,
        navigator: Navigator,
        initial_data: Mapping[str, Any] | None = None,
    ) -> None:
        self._client = client
        self._toaster = toaster
        self._navigator = navigator
        self.store_id = store_id
        self.initial_data = dict(initial_data) if initial_data else None
        self.values = self._default_values()
        self.errors: dict[str, str] = {}
        self.saved: dict[str, Any] | None = None
        self.loading = False
        self.open = False

    @classmethod
    def load(
        cls,
        client: httpx.Client,
        store_id: str,
        entity_id: str,
        toaster: Toaster,
        navigator: Navigator,
    ) -> EntityForm:
        """Fetch the record and open the form in edit mode.

        An unknown id (the ``new`` route, for instance) opens it in create
        mode instead; any other failure propagates.
        """
        response = client.get(f"/api/{store_id}/{cls.resource}/{entity_id}")
        if response.status_code == httpx.codes.NOT_FOUND:
            initial = None
        else:
            response.raise_for_status()
            initial = response.json()
        return cls(client, store_id, toaster, navigator, initial_data=initial)

    # --- Labels ---------------------------------------------------------------

    @property
    def is_edit(self) -> bool:
        return self.initial_data is not None

    @property
    def entity_id(self) -> str | None:
        return self.initial_data.get("id") if self.initial_data else None

    @property
    def title(self) -> str:
        return f"Edit {self.noun}" if self.is_edit else f"Create {self.noun}"

    @property
    def description(self) -> str:
        return f"Edit a {self.noun}" if self.is_edit else f"Add a {self.noun}"

    @property
    def toast_message(self) -> str:
        label = self.noun.capitalize()
        return f"{label} updated" if self.is_edit else f"{label} created"

    @property
    def action(self) -> str:
        return "Save Changes" if self.is_edit else "Create"

    # --- Paths ----------------------------------------------------------------

    @property
    def collection_path(self) -> str:
        return f"/api/{self.store_id}/{self.resource}"

    @property
    def item_path(self) -> str:
        return f"{self.collection_path}/{self.entity_id}"

    @property
    def listing_path(self) -> str:
        return f"/{self.store_id}/{self.resource}"

    # --- Validation -----------------------------------------------------------

    def validate(self, values: Mapping[str, Any] | None = None) -> FormSchema | None:
        """Merge *values* into the form and validate. Returns None on errors."""
        if values:
            self.values.update({_wire_key(key): value for key, value in values.items()})
        try:
            data = self.schema.model_validate(self.values)
        except pydantic.ValidationError as exc:
            self.errors = field_errors(exc)
            return None
        self.errors = {}
        return data

    # --- Submit ---------------------------------------------------------------

    def submit(self, values: Mapping[str, Any] | None = None) -> bool:
        if self.loading:
            return False
        data = self.validate(values)
        if data is None:
            return False

        payload = data.model_dump(mode="json", by_alias=True)
        try:
            self.loading = True
            if self.is_edit:
                response = self._client.patch(self.item_path, json=payload)
            else:
                response = self._client.post(self.collection_path, json=payload)
            response.raise_for_status()
            self.saved = _json_body(response)
            self._navigator.refresh()
            self._navigator.push(self.listing_path)
            self._toaster.success(self.toast_message)
            return True
        except httpx.HTTPError as exc:
            logger.warning(f"Saving {self.noun} in store {self.store_id} failed: {exc}")
            self._toaster.error(GENERIC_FAILURE)
            return False
        finally:
            self.loading = False

    # --- Delete ---------------------------------------------------------------

    def request_delete(self) -> bool:
        """Open the confirmation modal. Only records that exist can be deleted."""
        if not self.is_edit or self.loading:
            return False
        self.open = True
        return True

    def close_modal(self) -> None:
        self.open = False

    def confirm_delete(self) -> bool:
        if not self.open or self.loading:
            return False
        try:
            self.loading = True
            response = self._client.delete(self.item_path)
            response.raise_for_status()
            self._navigator.refresh()
            self._navigator.push(self.listing_path)
            self._toaster.success(f"{self.noun.capitalize()} deleted.")
            return True
        except httpx.HTTPError as exc:
            logger.warning(f"Deleting {self.noun} {self.entity_id} failed: {exc}")
            self._toaster.error(self.delete_failure)
            return False
        finally:
            self.loading = False
            self.open = False

    # --- Helpers --------------------------------------------------------------

    def _default_values(self) -> dict[str, Any]:
        values = {_wire_key(key): value for key, value in self.defaults.items()}
        if self.initial_data:
            for key in values:
                if key in self.initial_data:
                    values[key] = self.initial_data[key]
        # Forms edit their values in place; never share lists with the class.
        return copy.deepcopy(values)


class ColorForm(EntityForm):
    schema = ColorFormValues
    resource = "colors"
    noun = "color"
    defaults = {"name": "", "value": ""}
    delete_failure = "Make sure you remove all products using this color first."


class SizeForm(EntityForm):
    schema = SizeFormValues
    resource = "sizes"
    noun = "size"
    defaults = {"name": "", "value": ""}
    delete_failure = "Make sure you remove all products using this size first."


class BillboardForm(EntityForm):
    schema = BillboardFormValues
    resource = "billboards"
    noun = "billboard"
    defaults = {"label": "", "image_url": ""}
    delete_failure = "Make sure you removed all categories using this billboard first."


class CategoryForm(EntityForm):
    schema = CategoryFormValues
    resource = "categories"
    noun = "category"
    defaults = {"name": "", "billboard_id": ""}
    delete_failure = "Make sure you removed all products using this category first."


class ProductForm(EntityForm):
    schema = ProductFormValues
    resource = "products"
    noun = "product"
    defaults = {
        "name": "",
        "images": [],
        "price": "",
        "category_id": "",
        "color_id": "",
        "size_id": "",
        "is_featured": False,
        "is_archived": False,
    }
