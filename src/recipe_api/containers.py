"""Dependency container wiring for the application."""

from dataclasses import dataclass
from pathlib import Path

from supabase import create_client

from recipe_api.adapters.bcrypt_password_hasher import BcryptPasswordHasher
from recipe_api.adapters.jwt_token_signer import JwtTokenSigner
from recipe_api.adapters.local_image_store import LocalImageStore
from recipe_api.adapters.supabase_comment_repository import SupabaseCommentRepository
from recipe_api.adapters.supabase_like_repository import SupabaseLikeRepository
from recipe_api.adapters.supabase_rating_repository import SupabaseRatingRepository
from recipe_api.adapters.supabase_recipe_repository import SupabaseRecipeRepository
from recipe_api.adapters.supabase_user_repository import SupabaseUserRepository
from recipe_api.config import Settings
from recipe_api.services.auth import AuthService
from recipe_api.services.comments import CommentService
from recipe_api.services.images import ImageService
from recipe_api.services.likes import LikeService
from recipe_api.services.ratings import RatingService
from recipe_api.services.recipes import RecipeService
from recipe_api.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    auth_service: AuthService
    recipe_service: RecipeService
    comment_service: CommentService
    rating_service: RatingService
    like_service: LikeService
    image_service: ImageService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    recipe_repository = SupabaseRecipeRepository(supabase_client)
    comment_repository = SupabaseCommentRepository(supabase_client)
    user_service = UserService(user_repository)
    auth_service = AuthService(
        user_repository=user_repository,
        password_hasher=BcryptPasswordHasher(rounds=resolved_settings.bcrypt_rounds),
        token_signer=JwtTokenSigner(
            secret=resolved_settings.jwt_secret,
            algorithm=resolved_settings.jwt_algorithm,
            expires_minutes=resolved_settings.jwt_expires_minutes,
        ),
    )
    image_store = LocalImageStore(Path(resolved_settings.image_storage_dir))
    recipe_service = RecipeService(
        repository=recipe_repository,
        comment_repository=comment_repository,
        user_service=user_service,
        image_store=image_store,
    )
    comment_service = CommentService(
        repository=comment_repository,
        recipe_repository=recipe_repository,
        user_service=user_service,
    )
    rating_service = RatingService(
        repository=SupabaseRatingRepository(supabase_client),
        recipe_repository=recipe_repository,
    )
    like_service = LikeService(
        repository=SupabaseLikeRepository(supabase_client),
        recipe_repository=recipe_repository,
    )
    image_service = ImageService(
        recipe_repository=recipe_repository, store=image_store
    )

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        auth_service=auth_service,
        recipe_service=recipe_service,
        comment_service=comment_service,
        rating_service=rating_service,
        like_service=like_service,
        image_service=image_service,
    )
