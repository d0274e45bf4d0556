"""Checkout session registry"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..services.checkout_wizard import CheckoutWizard
from .context import AuthContext, CartContext, Navigator, Notifier


@dataclass
class CheckoutSession:
    """One shopper's checkout, with the collaborators its wizard uses"""
    session_id: str
    created_at: datetime
    updated_at: datetime
    auth: AuthContext
    cart: CartContext
    wizard: CheckoutWizard
    notifier: Notifier = field(default_factory=Notifier)
    navigator: Navigator = field(default_factory=Navigator)

    def touch(self) -> None:
        self.updated_at = datetime.utcnow()


class SessionManager:
    """Manages checkout sessions"""

    def __init__(self):
        self.sessions: dict[str, CheckoutSession] = {}

    def create_session(
        self,
        auth: AuthContext,
        cart: CartContext,
        wizard_factory,
    ) -> CheckoutSession:
        """
        Create a new session.

        wizard_factory is called with (auth, cart, notifier, navigator) and
        returns the session's CheckoutWizard.
        """
        now = datetime.utcnow()
        notifier = Notifier()
        navigator = Navigator()
        session = CheckoutSession(
            session_id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
            auth=auth,
            cart=cart,
            wizard=wizard_factory(auth, cart, notifier, navigator),
            notifier=notifier,
            navigator=navigator,
        )
        self.sessions[session.session_id] = session
        return session

    def get_session(self, session_id: str) -> Optional[CheckoutSession]:
        """Get session by ID"""
        return self.sessions.get(session_id)

    def delete_session(self, session_id: str) -> bool:
        """Delete a session"""
        if session_id in self.sessions:
            del self.sessions[session_id]
            return True
        return False

    def cleanup_old_sessions(self, max_age_hours: int = 24) -> int:
        """Remove sessions older than max_age_hours"""
        now = datetime.utcnow()
        old_sessions = [
            sid for sid, session in self.sessions.items()
            if (now - session.updated_at).total_seconds() > max_age_hours * 3600
        ]
        for sid in old_sessions:
            del self.sessions[sid]
        return len(old_sessions)


# Singleton instance
session_manager = SessionManager()
