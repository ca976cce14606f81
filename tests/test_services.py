# tests/test_services.py
import base64
from urllib.parse import parse_qs

import httpx
import pytest

from creator_hub_api.app.core.security import verify_password
from creator_hub_api.app.schemas.bookmark import BookmarkRequest
from creator_hub_api.app.schemas.content import ContentCreate, ContentRequest
from creator_hub_api.app.schemas.message import MessageRequest
from creator_hub_api.app.schemas.user import UserCreate, UserUpdate
from creator_hub_api.app.services.bookmark_service import BookmarkService
from creator_hub_api.app.services.content_service import ContentService
from creator_hub_api.app.services.follow_service import FollowService
from creator_hub_api.app.services.message_service import MessageService
from creator_hub_api.app.services.payment_service import PaymentService, StripeGateway
from creator_hub_api.app.services.user_service import UserService

pytestmark = pytest.mark.asyncio


async def make_user(storage, username):
    return await UserService.register(storage, UserCreate(username=username, password="secret"))


class TestUserService:

    async def test_register_hashes_password(self, storage):
        user = await make_user(storage, "alice")
        assert user.password != "secret"
        assert verify_password("secret", user.password)

    async def test_register_rejects_duplicate_username_any_case(self, storage):
        await make_user(storage, "alice")
        with pytest.raises(ValueError, match="Username already exists"):
            await make_user(storage, "ALICE")

    async def test_authenticate(self, storage):
        user = await make_user(storage, "alice")
        assert (await UserService.authenticate(storage, "Alice", "secret")).id == user.id
        assert await UserService.authenticate(storage, "alice", "wrong") is None
        assert await UserService.authenticate(storage, "nobody", "secret") is None

    async def test_update_profile_only_touches_sent_fields(self, storage):
        user = await make_user(storage, "alice")
        await UserService.update_profile(storage, user.id, UserUpdate(bio="first", display_name="Al"))
        updated = await UserService.update_profile(storage, user.id, UserUpdate(bio="second"))

        assert updated.bio == "second"
        assert updated.display_name == "Al"

    async def test_update_profile_of_missing_user(self, storage):
        assert await UserService.update_profile(storage, 9, UserUpdate(bio="x")) is None


class TestContentService:

    async def test_view_counts_but_returns_value_before_increment(self, storage):
        content = await ContentService.create(
            storage, ContentRequest(title="Clip", content_url="https://x/v.mp4"), creator_id=1
        )
        assert content.creator_id == 1

        seen = await ContentService.view(storage, content.id)
        assert seen.views == 0
        assert (await storage.get_content_by_id(content.id)).views == 1

    async def test_view_unknown_content(self, storage):
        assert await ContentService.view(storage, 1) is None
        assert await storage.get_all_content() == []


class TestMessageService:

    async def test_send_uses_caller_as_sender(self, storage):
        alice = await make_user(storage, "alice")
        bob = await make_user(storage, "bob")
        message = await MessageService.send(
            storage, alice.id, MessageRequest(receiver_id=bob.id, content="hi")
        )
        assert message.sender_id == alice.id
        assert message.receiver_id == bob.id

    async def test_send_to_unknown_receiver(self, storage):
        alice = await make_user(storage, "alice")
        with pytest.raises(LookupError):
            await MessageService.send(storage, alice.id, MessageRequest(receiver_id=5, content="hi"))
        assert await storage.get_user_messages(alice.id) == []


class TestBookmarkService:

    async def test_add_requires_existing_content(self, storage):
        with pytest.raises(LookupError):
            await BookmarkService.add(storage, 1, BookmarkRequest(content_id=1))

    async def test_add_and_remove(self, storage):
        content = await storage.create_content(
            ContentCreate(title="Clip", content_url="https://x/v.mp4", creator_id=1)
        )
        bookmark = await BookmarkService.add(storage, 3, BookmarkRequest(content_id=content.id))
        assert bookmark.user_id == 3
        assert await BookmarkService.remove(storage, 3, content.id) is True
        assert await BookmarkService.list_for_user(storage, 3) == []


class TestFollowService:

    async def test_follow_twice_is_rejected(self, storage):
        a = await make_user(storage, "a")
        b = await make_user(storage, "b")
        await FollowService.follow(storage, a.id, b.id)
        with pytest.raises(ValueError, match="Already following"):
            await FollowService.follow(storage, a.id, b.id)
        assert len(await FollowService.followers(storage, b.id)) == 1

    async def test_follow_unknown_user(self, storage):
        a = await make_user(storage, "a")
        with pytest.raises(LookupError):
            await FollowService.follow(storage, a.id, 42)

    async def test_unfollow(self, storage):
        a = await make_user(storage, "a")
        b = await make_user(storage, "b")
        await FollowService.follow(storage, a.id, b.id)
        assert await FollowService.unfollow(storage, a.id, b.id) is True
        assert await FollowService.following(storage, a.id) == []


class TestPaymentService:

    async def test_intent_carries_price_and_user(self, storage, gateway):
        user = await make_user(storage, "alice")
        secret = await PaymentService.create_premium_intent(gateway, user)

        intent = gateway.intents["pi_1"]
        assert secret == intent.client_secret
        assert intent.metadata == {"userId": str(user.id), "subscriptionType": "premium"}

    async def test_confirm_marks_user_premium(self, storage, gateway):
        user = await make_user(storage, "alice")
        gateway.add_intent("pi_ok", "succeeded", user.id, customer="cus_9")

        updated = await PaymentService.confirm_subscription(storage, gateway, user, "pi_ok")
        assert updated.is_premium is True
        assert updated.stripe_customer_id == "cus_9"

    async def test_confirm_without_customer_stores_none(self, storage, gateway):
        user = await make_user(storage, "alice")
        await storage.update_stripe_customer_id(user.id, "cus_old")
        gateway.add_intent("pi_ok", "succeeded", user.id)

        updated = await PaymentService.confirm_subscription(storage, gateway, user, "pi_ok")
        assert updated.stripe_customer_id is None

    async def test_confirm_rejects_unfinished_payment(self, storage, gateway):
        user = await make_user(storage, "alice")
        gateway.add_intent("pi_wait", "processing", user.id)
        with pytest.raises(ValueError):
            await PaymentService.confirm_subscription(storage, gateway, user, "pi_wait")
        assert (await storage.get_user(user.id)).is_premium is False

    async def test_confirm_rejects_other_users_payment(self, storage, gateway):
        user = await make_user(storage, "alice")
        gateway.add_intent("pi_bob", "succeeded", user.id + 1)
        with pytest.raises(PermissionError):
            await PaymentService.confirm_subscription(storage, gateway, user, "pi_bob")


class TestStripeGateway:

    async def test_create_payment_intent_request(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["Authorization"]
            seen["form"] = parse_qs(request.content.decode())
            return httpx.Response(
                200,
                json={"id": "pi_1", "status": "requires_payment_method", "client_secret": "pi_1_secret", "metadata": {}},
            )

        gateway = StripeGateway("sk_test_1", api_base="https://stripe.test/v1", transport=httpx.MockTransport(handler))
        intent = await gateway.create_payment_intent(999, "usd", {"userId": "1"})

        assert intent.client_secret == "pi_1_secret"
        assert seen["method"] == "POST"
        assert seen["url"] == "https://stripe.test/v1/payment_intents"
        assert seen["auth"] == "Basic " + base64.b64encode(b"sk_test_1:").decode()
        assert seen["form"] == {"amount": ["999"], "currency": ["usd"], "metadata[userId]": ["1"]}

    async def test_retrieve_payment_intent(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/v1/payment_intents/pi_7"
            return httpx.Response(
                200, json={"id": "pi_7", "status": "succeeded", "customer": "cus_1", "metadata": {"userId": "1"}}
            )

        gateway = StripeGateway("sk_test_1", api_base="https://stripe.test/v1", transport=httpx.MockTransport(handler))
        intent = await gateway.retrieve_payment_intent("pi_7")
        assert (intent.status, intent.customer, intent.metadata["userId"]) == ("succeeded", "cus_1", "1")

    async def test_api_errors_propagate(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(402, json={"error": {"message": "declined"}}))
        gateway = StripeGateway("sk_test_1", api_base="https://stripe.test/v1", transport=transport)
        with pytest.raises(httpx.HTTPStatusError):
            await gateway.retrieve_payment_intent("pi_1")

    async def test_missing_secret_key(self):
        with pytest.raises(RuntimeError, match="STRIPE_SECRET_KEY"):
            await StripeGateway("").retrieve_payment_intent("pi_1")
