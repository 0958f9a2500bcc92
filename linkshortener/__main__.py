"""Demo entry point: run the shortener through a full link lifecycle

Usage:
    python -m linkshortener [--url URL] [--new-url URL] [--log-level LEVEL]

Steps:
    - Create a short link with a generated slug
    - Redirect through it once
    - Try to create the same slug again (must fail)
    - Change the link's URL and redirect again
    - Print the link's stats and check a never-issued slug has none
"""

from __future__ import annotations

import argparse
import sys

from linkshortener.service import UrlShortenerService
from linkshortener.exceptions import ShortenerError, SlugAlreadyInUseError, SlugNotFoundError
from linkshortener.utils import initialize_logging


def run_demo(service: UrlShortenerService, url: str, new_url: str) -> bool:
    """Walk one link through its lifecycle, printing every step.

    Returns:
        bool: True if every step behaved as expected.
    """
    try:
        link = service.create_short_link(url)
    except ShortenerError as e:
        print(f'Can not create short link. {e.error_code}: {e}')
        return False
    print(f'Created short link. Slug: {link.slug}')

    redirected = service.redirect(link.slug)
    if redirected != link:
        print(f'Slug {link.slug} redirected to unexpected link {redirected}')
        return False
    print(f'Slug redirects to link: {redirected.url}')

    try:
        service.create_short_link(url, slug=link.slug)
    except SlugAlreadyInUseError as e:
        print(f'Can not create new short link with slug {link.slug}. {e.error_code}')
    else:
        print(f'Same slug {link.slug} was created twice!')
        return False

    try:
        service.change_short_link(link.slug, new_url)
    except ShortenerError as e:
        print(f'Can not change url of link. {e.error_code}: {e}')
        return False

    redirected_again = service.redirect(link.slug)
    if redirected_again == redirected:
        print(f'Slug {link.slug} still redirects to {redirected.url} after URL change!')
        return False
    print(f'Slug redirects to link: {redirected_again.url} after change URL')

    stats = service.get_stats(link.slug)
    print(f'Redirect count for {stats.link.slug} is: {stats.redirects}')

    unused = service.generate_unique_slug()
    try:
        service.get_stats(unused)
    except SlugNotFoundError as e:
        print(f'Error getting stats for non-existing slug {unused}: {e.error_code}')
    else:
        print(f'Got stats for non-existing slug {unused}!')
        return False

    return stats.redirects == 2


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.

    Returns:
        int: process exit status, 0 when the demo succeeded.
    """
    parser = argparse.ArgumentParser(
        prog='linkshortener',
        description='Run the URL shortener through create, redirect, change URL and stats',
    )
    parser.add_argument(
        '--url',
        default='https://docs.rs',
        help='URL to shorten (default: https://docs.rs)',
    )
    parser.add_argument(
        '--new-url',
        default='https://docs.rs/tokio/latest/tokio/',
        help='URL the link is changed to (default: https://docs.rs/tokio/latest/tokio/)',
    )
    parser.add_argument(
        '--log-level',
        default=None,
        help='Log level name, e.g. DEBUG or WARNING (default: $LOG_LEVEL or INFO)',
    )

    args = parser.parse_args(argv)

    initialize_logging(args.log_level)
    service = UrlShortenerService.from_config()
    return 0 if run_demo(service, args.url, args.new_url) else 1


if __name__ == '__main__':
    sys.exit(main())
