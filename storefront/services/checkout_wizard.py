"""
Checkout Wizard

Two-step linear checkout: Shipping -> Review, then submit.

    shipping --next--> review --submit--> submitting --ok--> completed
        ^                 |                    |
        +------back-------+ <------failure-----+

Submission is guarded by an in-flight flag so that only one create call is
issued per submit, however many times submit is triggered.
"""

import asyncio
import logging
from enum import Enum
from typing import Any, Optional

from ..core.context import AuthContext, CartContext, Navigator, Notifier
from ..core.errors import PreconditionError
from ..models.checkout import DEFAULT_PAYMENT_METHOD, ShippingForm
from ..models.result import Result
from .order_client import OrderClient
from .payload_builder import build_order_request
from .profile_client import ProfileClient

logger = logging.getLogger(__name__)

# Profile key -> shipping form field. The profile has no state/province.
PROFILE_FIELD_MAP = {
    "firstName": "first_name",
    "lastName": "last_name",
    "email": "email",
    "phone": "phone",
    "address": "address",
    "city": "city",
    "postalCode": "zip_code",
    "country": "country",
}


class CheckoutStep(str, Enum):
    """Current step of the checkout wizard"""
    SHIPPING = "shipping"
    REVIEW = "review"
    SUBMITTING = "submitting"
    COMPLETED = "completed"


class CheckoutWizard:
    """Checkout state machine for one shopper"""

    def __init__(
        self,
        client: OrderClient,
        auth: AuthContext,
        cart: CartContext,
        notifier: Notifier,
        navigator: Navigator,
        payment_method: str = DEFAULT_PAYMENT_METHOD,
        overwrite_edited_fields: bool = False,
    ):
        """
        Initialize the wizard.

        Args:
            client: Order API client used to create the order
            auth: Authenticated-user context
            cart: Cart collaborator; cleared after a successful order
            notifier: Toast sink
            navigator: Navigation sink
            payment_method: Payment method sent with the order
            overwrite_edited_fields: Let a late profile fetch replace fields
                the user has already edited
        """
        self.client = client
        self.auth = auth
        self.cart = cart
        self.notifier = notifier
        self.navigator = navigator
        self.payment_method = payment_method
        self.overwrite_edited_fields = overwrite_edited_fields

        self.step = CheckoutStep.SHIPPING
        self.in_flight = False
        self.form = ShippingForm()
        self._edited: set[str] = set()
        self._prefill_task: Optional[asyncio.Task] = None

    # ==================== Access ====================

    def check_access(self) -> bool:
        """Redirect away when there is no user or nothing to check out"""
        if not self.auth.is_authenticated:
            self.navigator.go("/login", state={"from": "/checkout"})
            return False

        if self.cart.is_empty() and self.step != CheckoutStep.COMPLETED:
            self.navigator.go("/products")
            return False

        return True

    # ==================== Shipping form ====================

    def update_field(self, name: str, value: str) -> None:
        """Set a shipping field from user input and mark it edited"""
        field_name = self._field_name(name)
        setattr(self.form, field_name, value)
        self._edited.add(field_name)

    def update_fields(self, values: dict[str, str]) -> None:
        for name, value in values.items():
            self.update_field(name, value)

    def is_edited(self, name: str) -> bool:
        return self._field_name(name) in self._edited

    def apply_profile(self, profile: dict[str, Any]) -> list[str]:
        """
        Merge fetched profile data into the form.

        Empty profile values are ignored. Fields the user has edited are
        kept unless overwrite_edited_fields is set.

        Returns:
            Names of the fields that were filled
        """
        filled = []
        for profile_key, field_name in PROFILE_FIELD_MAP.items():
            value = profile.get(profile_key)
            if value is None or str(value) == "":
                continue
            if field_name in self._edited and not self.overwrite_edited_fields:
                continue
            setattr(self.form, field_name, str(value))
            filled.append(field_name)

        if filled:
            logger.debug(f"Prefilled shipping fields: {filled}")
        return filled

    async def prefill(self, profile_client: ProfileClient) -> list[str]:
        """Fetch the user's profile and merge it into the form"""
        if not self.auth.is_authenticated:
            return []

        result = await profile_client.get_profile(self.auth.user_id)
        if not result.success:
            logger.error(f"Failed to fetch user data: {result.error}")
            return []

        if not isinstance(result.data, dict):
            return []
        return self.apply_profile(result.data)

    def start_prefill(self, profile_client: ProfileClient) -> asyncio.Task:
        """
        Schedule the profile prefill without waiting for it.

        For callers that own the event loop. The HTTP routes hand ``prefill``
        to FastAPI background tasks instead, which outlive the request.
        """
        self._prefill_task = asyncio.create_task(self.prefill(profile_client))
        return self._prefill_task

    # ==================== Steps ====================

    def next_step(self) -> CheckoutStep:
        """Shipping -> Review"""
        if self.step == CheckoutStep.SHIPPING:
            self._transition(CheckoutStep.REVIEW)
        return self.step

    def previous_step(self) -> CheckoutStep:
        """Review -> Shipping"""
        if self.step == CheckoutStep.REVIEW:
            self._transition(CheckoutStep.SHIPPING)
        return self.step

    async def submit(self) -> Optional[Result]:
        """
        Submit the order from the Review step.

        Returns the create result, or None when the call was a no-op
        (already in flight, or not on the Review step) or a precondition
        redirected the user.
        """
        if self.in_flight:
            logger.debug("Submit ignored: order creation already in flight")
            return None

        if self.step != CheckoutStep.REVIEW:
            logger.debug(f"Submit ignored in step {self.step.value}")
            return None

        # Set before the first await so a concurrent submit sees it
        self.in_flight = True
        self._transition(CheckoutStep.SUBMITTING)

        try:
            items = self.cart.items
            totals = self.cart.totals()

            try:
                request = build_order_request(
                    items,
                    self.form,
                    self.auth.user_id,
                    totals.total,
                    payment_method=self.payment_method,
                )
            except PreconditionError as e:
                logger.info(f"Checkout precondition failed: {e}")
                self._transition(CheckoutStep.REVIEW)
                self.navigator.go("/login", state={"from": "/checkout"})
                return None

            self.notifier.success("Processing your order...")
            result = await self.client.create_order(request)

            if not result.success:
                self.notifier.error(result.error or "Failed to process order. Please try again.")
                self._transition(CheckoutStep.REVIEW)
                return result

            data = result.data if isinstance(result.data, dict) else {}
            self.cart.clear()
            self.notifier.success("Order placed successfully!")
            self._transition(CheckoutStep.COMPLETED)
            self.navigator.go(
                "/payment-success",
                state={
                    "order": {
                        "id": data.get("id"),
                        "orderNumber": data.get("orderNumber"),
                        "total": totals.total,
                        "items": [item.model_dump() for item in items],
                        "shipping": self.form.model_dump(),
                    }
                },
            )
            return result

        finally:
            self.in_flight = False

    def _transition(self, new_step: CheckoutStep) -> None:
        logger.info(f"Checkout step: {self.step.value} -> {new_step.value}")
        self.step = new_step

    @staticmethod
    def _field_name(name: str) -> str:
        """Accept either the snake_case field name or its camelCase alias"""
        if name in ShippingForm.model_fields:
            return name
        for field_name, info in ShippingForm.model_fields.items():
            if info.alias == name:
                return field_name
        raise KeyError(f"Unknown shipping field: {name}")
