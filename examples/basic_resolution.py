"""
Basic resolution example.

Demonstrates public suffix resolution, host normalization and wrapper URL
decoding against the bundled public suffix list.
"""

import logging

from url_suffix.config import get_config
from url_suffix.matching import DomainMatcher
from url_suffix.normalization import HostNormalizer, URLNormalizer
from url_suffix.rules import init_rule_table
from url_suffix.wrappers import display_url, encode_reader_mode_url

logging.basicConfig(
    level=get_config().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


def main():
    """Run basic resolution example."""
    print("=" * 60)
    print("url-suffix: Basic Resolution Example")
    print("=" * 60)

    table = init_rule_table()
    if table is None:
        print("Suffix rules unavailable; see log output")
        return

    matcher = DomainMatcher(table)
    hosts = HostNormalizer(matcher)
    urls = URLNormalizer(hosts)

    # Example 1: Public suffix and base domain
    print("\n1. Public Suffix Resolution")
    print("-" * 60)

    for host in ["www.bbc.co.uk", "foo.ck", "www.ck", "news.example.com", "localhost", "::1"]:
        print(
            f"{host:<20} suffix={hosts.public_suffix(host)!s:<10} "
            f"base={hosts.base_domain(host)!s:<16} sld={hosts.second_level_domain(host)}"
        )

    # Example 2: URL description
    print("\n\n2. URL Description")
    print("-" * 60)

    description = urls.describe("https://m.foo.co.uk:8443/bar/baz?noo=abc#123")
    print(f"Raw URL: {description.raw}")
    print(f"Base domain: {description.base_domain}")
    print(f"Second level domain: {description.host_sld}")
    print(f"Domain URL: {description.domain_url}")
    print(f"Origin: {description.origin}")

    # Example 3: Wrapper URLs
    print("\n\n3. Wrapper URLs")
    print("-" * 60)

    reader_url = encode_reader_mode_url(
        "https://user:pw@www.example.com/article", "http://localhost:6571/reader-mode/page"
    )
    print(f"Reader mode URL: {reader_url}")
    print(f"Display URL: {display_url(reader_url)}")

    print(f"\nCache: {matcher.cache_info()}")


if __name__ == "__main__":
    main()
