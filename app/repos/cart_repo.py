# app/repos/cart_repo.py
import redis
from pydantic import ValidationError
from redis.exceptions import RedisError

from app.domain.exceptions import CartAlreadyExists, InvalidArgument, StoreUnavailable
from app.domain.models import Cart, CartItem
from app.utils.settings import REDIS_URL, CART_TTL_SECONDS
from app.utils.logging import get_logger

logger = get_logger(__name__)


class CartRepo:
    """
    Koszyk w redisie: klucz = cart_id, wartosc = json {"items": [{"_id", "qty"}]}
    -get bez klucza nie idzie do redisa
    -create przez SET NX, redis rozstrzyga wyscig dwoch requestow
    -bledy redisa -> StoreUnavailable, bez retry
    """

    def __init__(self, client: redis.Redis | None = None, ttl: int = CART_TTL_SECONDS):
        self.redis = client or redis.Redis.from_url(REDIS_URL, decode_responses=True)
        self.ttl = ttl

    def _expiry(self) -> int | None:
        return self.ttl if self.ttl > 0 else None

    def get_cart(self, cart_id: str | None) -> Cart | None:
        if not cart_id:
            return None

        try:
            value = self.redis.get(cart_id)
        except RedisError as e:
            logger.error(f"Redis GET {cart_id} failed: {e}")
            raise StoreUnavailable("Magazyn koszykow niedostepny") from e

        if not value:
            return None

        try:
            return Cart.model_validate_json(value)
        except ValidationError:
            logger.warning(f"Cart {cart_id} has unreadable payload, treating as absent")
            return None

    def create_cart(self, cart_id: str, initial_item: CartItem) -> Cart:
        if not cart_id:
            raise InvalidArgument("cart_id jest wymagane do utworzenia koszyka")

        new_cart = Cart(items=[initial_item])
        try:
            #SET <cart_id> <json> NX EX <ttl>
            created = self.redis.set(
                name=cart_id,
                value=new_cart.model_dump_json(by_alias=True),
                nx=True,
                ex=self._expiry(),
            )
        except RedisError as e:
            logger.error(f"Redis SET NX {cart_id} failed: {e}")
            raise StoreUnavailable("Magazyn koszykow niedostepny") from e

        if not created:
            raise CartAlreadyExists(cart_id)

        logger.info(f"Created cart {cart_id} with book {initial_item.book_id}")
        return new_cart

    def update_cart(self, cart_id: str, cart: Cart) -> Cart:
        if not cart_id:
            raise InvalidArgument("cart_id jest wymagane do aktualizacji koszyka")

        try:
            self.redis.set(
                name=cart_id,
                value=cart.model_dump_json(by_alias=True),
                ex=self._expiry(),
            )
        except RedisError as e:
            logger.error(f"Redis SET {cart_id} failed: {e}")
            raise StoreUnavailable("Magazyn koszykow niedostepny") from e

        return cart
