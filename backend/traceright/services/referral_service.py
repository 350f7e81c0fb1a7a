"""Referral codes and conversion tracking (in-memory)."""

import logging
import secrets
import string
import threading
from dataclasses import dataclass
from typing import Dict, Optional

logger = logging.getLogger(__name__)

CODE_PREFIX = "VEO-"
CODE_LENGTH = 6


@dataclass
class ReferralNode:
    user_id: str
    referral_code: str
    referred_by: Optional[str] = None
    viral_coefficient: float = 0
    downstream_referrals: int = 0


class ReferralTracker:
    """Maps users to their referral code and downstream count."""

    def __init__(self):
        self._nodes: Dict[str, ReferralNode] = {}
        self._lock = threading.Lock()

    def _generate_code(self) -> str:
        chars = string.ascii_uppercase + string.digits
        return CODE_PREFIX + "".join(secrets.choice(chars) for _ in range(CODE_LENGTH))

    def generate_code(self, user_id: str) -> str:
        """Issue a fresh code for ``user_id``, replacing any previous one."""
        code = self._generate_code()
        with self._lock:
            self._nodes[user_id] = ReferralNode(user_id=user_id, referral_code=code)
        logger.info(f"[Referral] Code {code} issued to user {user_id}")
        return code

    def track_conversion(self, new_user_id: str, used_code: str) -> Optional[str]:
        """Credit the referrer owning ``used_code``. Returns the referrer id or None."""
        with self._lock:
            for node in self._nodes.values():
                if node.referral_code == used_code:
                    node.downstream_referrals += 1
                    node.viral_coefficient = node.downstream_referrals
                    logger.info(f"[Referral] {new_user_id} converted via {used_code} (referrer {node.user_id})")
                    return node.user_id
        logger.info(f"[Referral] Unknown code {used_code} used by {new_user_id}")
        return None

    def get_node(self, user_id: str) -> Optional[ReferralNode]:
        return self._nodes.get(user_id)


referral_tracker = ReferralTracker()
