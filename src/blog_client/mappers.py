"""Mapping from response DTOs to domain entities.

Pure field renaming and reshaping; validation happens when the DTOs
are built from JSON.
"""

from dataclasses import replace

from blog_client.dto import (
    CategoryResponse,
    CommentResponse,
    LoginResponse,
    PostResponse,
    SearchResponse,
    UserResponse,
)
from blog_client.entities import AuthSession, Category, Comment, Post, SearchResult, User


def _blank_to_none(value: str | None) -> str | None:
    return value or None


def user_from_response(response: UserResponse) -> User:
    return User(
        id=response.id,
        username=response.username,
        fullname=response.fullname,
        email=response.email,
        image=_blank_to_none(response.image),
        created_at=response.created_at,
        updated_at=response.updated_at,
    )


def session_from_login(response: LoginResponse) -> AuthSession:
    return AuthSession(user=user_from_response(response), access_token=response.access_token)


def category_from_response(response: CategoryResponse) -> Category:
    return Category(
        id=response.id,
        name=response.name,
        created_at=response.created_at,
        updated_at=response.updated_at,
        post_count=response.counts.posts,
    )


def comment_from_response(response: CommentResponse) -> Comment:
    author = response.author
    return Comment(
        id=response.id,
        content=response.content,
        post_id=response.post_id,
        author_id=response.author_id or (author.id if author else ""),
        author_name=author.fullname if author else "",
        author_username=author.username if author else "",
        author_image=_blank_to_none(author.image) if author else None,
        created_at=response.created_at,
        updated_at=response.updated_at,
    )


def post_from_response(response: PostResponse) -> Post:
    """Map a post from a list/create/update/delete response.

    Comments are not part of list payloads, so ``comment_list`` stays empty.
    """
    author = response.author
    category = response.category
    return Post(
        id=response.id,
        title=response.title,
        content=response.content,
        image=_blank_to_none(response.photo),
        author=author.fullname if author else "",
        author_id=response.author_id or (author.id if author else ""),
        author_username=author.username if author else "",
        author_image=_blank_to_none(author.image) if author else None,
        category=category.name if category else "",
        category_id=response.category_id or (category.id if category else ""),
        created_at=response.created_at,
        updated_at=response.updated_at,
        likes=response.counts.likes,
        comments=response.counts.comments,
        is_liked=response.is_liked,
        slug=response.slug,
    )


def post_from_detail(response: PostResponse) -> Post:
    """Map a post from the detail endpoint, including its comments."""
    comment_list = tuple(comment_from_response(c) for c in response.comments)
    post = post_from_response(response)
    # The detail payload may omit _count; fall back to the embedded list
    return replace(
        post,
        comment_list=comment_list,
        comments=post.comments or len(comment_list),
    )


def search_result_from_response(response: SearchResponse) -> SearchResult:
    return SearchResult(
        users=[user_from_response(u) for u in response.users],
        categories=[category_from_response(c) for c in response.categories],
        posts=[post_from_response(p) for p in response.posts],
    )
