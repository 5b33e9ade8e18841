#!/usr/bin/env python3
"""
Demo script for the blog client.

Logs in against a running VirtualsBlog API, then walks through the home
feed, categories, search and a like toggle.

Usage:
    BLOG_API_BASE_URL=http://localhost:3000 python scripts/demo.py <username> <password>
"""

import asyncio
import sys

from blog_client import (
    AuthService,
    BlogService,
    HttpBlogApi,
    JsonUserStore,
    configure_logging,
    resource_states,
)


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


async def demo_home_feed(blog: BlogService, token: str) -> str | None:
    """Show the home feed and return the newest post id."""
    print_section("Home Feed")

    async for state in resource_states(blog.get_posts_for_home(token)):
        if state.is_pending:
            print("  ⏳ Loading...")
        elif state.is_failed:
            print(f"  ✗ {state.message}")
            return None
        else:
            for post in state.value:
                print(f"  • {post.title} by {post.author} ({post.likes} likes, {post.comments} comments)")
            return state.value[0].id if state.value else None
    return None


async def demo_categories(blog: BlogService, token: str) -> None:
    print_section("Categories")

    result = await blog.get_categories(token)
    if result.is_failed:
        print(f"  ✗ {result.message}")
        return
    for category in result.value:
        print(f"  • {category.name} ({category.post_count} posts)")


async def demo_search(blog: BlogService, token: str, keyword: str) -> None:
    print_section(f"Search: '{keyword}'")

    result = await blog.search(token, keyword)
    if result.is_failed:
        print(f"  ✗ {result.message}")
        return
    found = result.value
    print(f"  Users: {[u.username for u in found.users]}")
    print(f"  Categories: {[c.name for c in found.categories]}")
    print(f"  Posts: {[p.title for p in found.posts]}")


async def demo_like(blog: BlogService, token: str, post_id: str) -> None:
    print_section("Toggle Like")

    for _ in range(2):
        result = await blog.toggle_like(token, post_id)
        if result.is_failed:
            print(f"  ✗ {result.message}")
            return
        print(f"  ✓ Post {post_id} liked: {result.value.is_liked}")


async def main(username: str, password: str) -> None:
    """Run all demos."""
    configure_logging()
    print("\n🚀 Blog Client Demo")

    async with HttpBlogApi.create() as api:
        auth = AuthService(api=api, store=JsonUserStore.create())
        blog = BlogService.create(api=api)

        login = await auth.login(username, password)
        if login.is_failed:
            print(f"\n❌ Login failed: {login.message}")
            return
        token = login.value.access_token
        print(f"✓ Logged in as {login.value.user.fullname}")

        newest_id = await demo_home_feed(blog, token)
        await demo_categories(blog, token)
        await demo_search(blog, token, "android")
        if newest_id:
            await demo_like(blog, token, newest_id)

        auth.logout()

    print("\n" + "=" * 70)
    print("✅ Demo completed")
    print("=" * 70)


if __name__ == "__main__":
    if len(sys.argv) != 3:
        print(__doc__)
        sys.exit(1)
    asyncio.run(main(sys.argv[1], sys.argv[2]))
