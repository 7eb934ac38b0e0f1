"""
URL description.

Parses a URL once and derives every host-level view of it:
- public suffix, base domain and second level domain
- normalized host and canonical `scheme://host/` domain URL
- origin, host:port and locality checks
"""

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit

from url_suffix.normalization.host import HostNormalizer, is_ipv6_literal

# Permanent schemes from http://www.iana.org/assignments/uri-schemes/uri-schemes.xhtml
PERMANENT_URI_SCHEMES = frozenset(
    [
        "aaa", "aaas", "about", "acap", "acct", "cap", "cid", "coap", "coaps",
        "crid", "data", "dav", "dict", "dns", "example", "file", "ftp", "geo",
        "go", "gopher", "h323", "http", "https", "iax", "icap", "im", "imap",
        "info", "ipp", "ipps", "iris", "iris.beep", "iris.lwz", "iris.xpc",
        "iris.xpcs", "jabber", "ldap", "mailto", "mid", "msrp", "msrps", "mtqp",
        "mupdate", "news", "nfs", "ni", "nih", "nntp", "opaquelocktoken",
        "pkcs11", "pop", "pres", "reload", "rtsp", "rtsps", "rtspu", "service",
        "session", "shttp", "sieve", "sip", "sips", "sms", "snmp", "soap.beep",
        "soap.beeps", "stun", "stuns", "tag", "tel", "telnet", "tftp",
        "thismessage", "tip", "tn3270", "turn", "turns", "tv", "urn", "vemmi",
        "vnc", "ws", "wss", "xcon", "xcon-userid", "xmlrpc.beep", "xmlrpc.beeps",
        "xmpp", "z39.50r", "z39.50s",
    ]
)

WEB_SCHEMES = ("http", "https")
LOCAL_HOSTS = ("localhost", "127.0.0.1")


@dataclass(frozen=True)
class URLDescription:
    """
    Host-level view of a URL.

    Attributes:
        scheme: Scheme as written (empty if missing)
        host: Hostname without IPv6 brackets (None if missing)
        port: Explicit port (None if absent or invalid)
        path: Path as written
        public_suffix: Public suffix of the host
        base_domain: Registrable domain of the host
        host_sld: Second level domain, e.g. `foo` for `m.foo.com`
        normalized_host: Host without a leading www./mobile./m. label
            (IPv6 literals keep their brackets)
        domain_url: `scheme://normalized_host/`, or the raw URL
        raw: Original raw URL
    """

    scheme: str
    host: Optional[str]
    port: Optional[int]
    path: str
    public_suffix: Optional[str]
    base_domain: Optional[str]
    host_sld: str
    normalized_host: Optional[str]
    domain_url: str
    raw: str

    @property
    def is_ipv6(self) -> bool:
        return is_ipv6_literal(self.host)

    @property
    def host_port(self) -> Optional[str]:
        """`host:port`, or just the host when no port is given."""
        if not self.host:
            return None
        host = f"[{self.host}]" if self.is_ipv6 else self.host
        if self.port is not None:
            return f"{host}:{self.port}"
        return host

    @property
    def origin(self) -> Optional[str]:
        """`scheme://host:port` for http(s) URLs."""
        if not self.is_web_page(include_data_uris=False) or self.host_port is None:
            return None
        return f"{self.scheme}://{self.host_port}"

    @property
    def normalized_host_and_path(self) -> Optional[str]:
        if self.normalized_host is None:
            return None
        return self.normalized_host + (self.path or "/")

    @property
    def scheme_is_valid(self) -> bool:
        """Whether the scheme is a permanent IANA URI scheme."""
        return self.scheme in PERMANENT_URI_SCHEMES

    @property
    def is_local(self) -> bool:
        """Whether this is an http(s) URL pointing at the local machine."""
        if not self.is_web_page(include_data_uris=False):
            return False
        # Hostless web URLs (e.g. http://:6571) go to localhost
        if not self.host:
            return True
        return self.host.lower() in LOCAL_HOSTS

    def is_web_page(self, include_data_uris: bool = True) -> bool:
        """Whether the scheme is http, https or (optionally) data."""
        schemes = WEB_SCHEMES + ("data",) if include_data_uris else WEB_SCHEMES
        return self.scheme in schemes


class URLNormalizer:
    """
    Describe URLs in terms of their hosts.

    Usage:
        normalizer = URLNormalizer()
        result = normalizer.describe("https://m.foo.co.uk/bar?baz=1")
        print(result.base_domain)  # foo.co.uk
        print(result.host_sld)     # foo
        print(result.domain_url)   # https://foo.co.uk/
    """

    def __init__(self, hosts: Optional[HostNormalizer] = None):
        """
        Initialize normalizer.

        Args:
            hosts: Host normalizer (defaults to one over the process-wide rules)
        """
        self.hosts = hosts if hosts is not None else HostNormalizer()

    def describe(self, url: str) -> URLDescription:
        """
        Describe a URL.

        Args:
            url: Raw URL string

        Returns:
            URLDescription; host-derived fields are None when they cannot be
            resolved

        Raises:
            ValueError: If url is empty or not a string
        """
        if not url or not isinstance(url, str):
            raise ValueError(f"Invalid URL: {url}")

        parts = urlsplit(url.strip())
        host = parts.hostname or None
        port = self._safe_port(parts)
        hosts = self.hosts

        normalized_host = hosts.normalized_host(host)
        if is_ipv6_literal(normalized_host):
            normalized_host = f"[{normalized_host}]"

        if host is None:
            host_sld = url
            domain_url = url
        else:
            host_sld = hosts.second_level_domain(host)
            domain_url = hosts.canonical_origin(parts.scheme, host)

        return URLDescription(
            scheme=parts.scheme,
            host=host,
            port=port,
            path=parts.path,
            public_suffix=hosts.public_suffix(host),
            base_domain=hosts.base_domain(host),
            host_sld=host_sld,
            normalized_host=normalized_host,
            domain_url=domain_url,
            raw=url,
        )

    @staticmethod
    def _safe_port(parts) -> Optional[int]:
        """Port of a split URL, or None if missing or out of range."""
        try:
            return parts.port
        except ValueError:
            return None
