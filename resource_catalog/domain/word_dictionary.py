"""Curated word list for splitting compact resource identifiers.

The segmenter walks the dictionary longest-first, so the iteration order is
part of the contract: entries are deduplicated, sorted by descending length,
and entries of equal length keep their declared order.
"""

from typing import Iterable, Iterator

# Grouped by area; grouping has no effect on matching.
WORDS: tuple[str, ...] = (
    # Platforms and products
    'windows10', 'windows81', 'windows', 'android', 'ios', 'ipad', 'iphone',
    'mac', 'os', 'linux', 'chrome', 'edge', 'office', 'o365', 'outlook',
    'exchange', 'teams', 'sharepoint', 'onedrive', 'intune', 'entra', 'azure',
    'defender', 'autopilot', 'bitlocker', 'hello', 'aosp', 'knox', 'zebra',
    'win32', 'holographic', 'hololens', 'surface', 'kiosk', 'cloud', 'pc',

    # Abbreviations
    'ad', 'ip', 'id', 'api', 'vpp', 'mdm', 'mam', 'url', 'vpn', 'wifi',
    'scep', 'pkcs', 'pfx', 'asr', 'dkim', 'dlp', 'owa', 'cas', 'lob', 'dep',
    'mfa', 'sso', 'oem', 'usb', 'pin', 'tls', 'ssl', 'smtp', 'dns', 'atp',
    'sms', 'fido', 'oauth', 'saml', 'x509',

    # Device management
    'device', 'devices', 'management', 'managed', 'configuration',
    'configurations', 'compliance', 'compliant', 'policy', 'policies',
    'profile', 'profiles', 'enrollment', 'restriction', 'restrictions',
    'limit', 'platform', 'platforms', 'category', 'categories', 'script',
    'scripts', 'remediation', 'health', 'state', 'states', 'status',
    'inventory', 'hardware', 'firmware', 'driver', 'drivers', 'update',
    'updates', 'feature', 'features', 'quality', 'expedite', 'ring', 'rings',
    'deployment', 'deployments', 'custom', 'general', 'endpoint', 'protection',
    'antivirus', 'firewall', 'attack', 'surface', 'reduction', 'rule', 'rules',
    'detection', 'response', 'exploit', 'guard', 'application', 'applications',
    'app', 'apps', 'store', 'assignment', 'assignments', 'filter', 'filters',
    'scope', 'tag', 'tags', 'role', 'roles', 'definition', 'definitions',
    'notification', 'notifications', 'message', 'messages', 'template',
    'templates', 'terms', 'and', 'conditions', 'condition', 'conditional',
    'certificate', 'certificates', 'trusted', 'root', 'imported', 'derived',
    'credential', 'credentials', 'email', 'wired', 'network', 'networks',
    'settings', 'setting', 'catalog', 'shell', 'mobile', 'threat', 'defense',
    'connector', 'connectors', 'partner', 'partners', 'token', 'tokens',
    'push', 'apple', 'google', 'play', 'work', 'personal', 'corporate',
    'owned', 'owner', 'shared', 'multi', 'single', 'mode', 'edition',
    'upgrade', 'baseline', 'baselines', 'security', 'secure', 'boot',
    'encryption', 'account', 'accounts', 'local', 'user', 'users', 'group',
    'groups', 'admin', 'administrator', 'administrative', 'unit', 'units',
    'password', 'identity', 'identities', 'information', 'delivery',
    'optimization', 'domain', 'join', 'hybrid', 'health', 'monitoring',
    'boundary', 'kernel', 'extension', 'extensions', 'system', 'software',
    'for', 'business', 'advanced', 'smart', 'screen', 'control', 'controls',
    'access', 'program', 'lock', 'screen', 'wipe', 'retire', 'remote',
    'assistance', 'help', 'desk', 'brand', 'branding', 'intent', 'intents',
    'reusable', 'config', 'lobby', 'edu', 'education', 'team', 'viewer',

    # Identity and directory
    'authentication', 'authorization', 'method', 'methods', 'strength',
    'strengths', 'named', 'location', 'locations', 'cross', 'tenant',
    'tenants', 'external', 'collaboration', 'guest', 'guests', 'invite',
    'invitation', 'lifecycle', 'workflow', 'workflows', 'entitlement',
    'package', 'packages', 'catalogs', 'review', 'reviews', 'privileged',
    'eligibility', 'eligible', 'schedule', 'schedules', 'request', 'requests',
    'directory', 'service', 'principal', 'principals', 'consent', 'grant',
    'grants', 'permission', 'permissions', 'claims', 'mapping', 'home',
    'realm', 'discovery', 'token', 'lifetime', 'issuance', 'federation',
    'federated', 'verified', 'authenticator', 'temporary', 'pass', 'voice',
    'software', 'oath', 'phone', 'registration', 'campaign', 'risk', 'risky',
    'sign', 'in', 'out', 'session', 'sessions', 'continuous', 'evaluation',
    'default', 'organization', 'organizational', 'relationship', 'sharing',
    'sync', 'connect', 'custom', 'attribute', 'attributes', 'set', 'sets',

    # Exchange
    'mailbox', 'mailboxes', 'mail', 'transport', 'accepted', 'remote',
    'inbound', 'outbound', 'journal', 'journaling', 'anti', 'phish',
    'phishing', 'spam', 'malware', 'hosted', 'content', 'safe', 'links',
    'attachment', 'attachments', 'signing', 'quarantine', 'plan', 'plans',
    'address', 'book', 'list', 'lists', 'distribution', 'dynamic', 'contact',
    'contacts', 'calendar', 'processing', 'resource', 'room', 'retention',
    'tag', 'audit', 'log', 'logs', 'clutter', 'focused', 'inbox', 'junk',
    'sender', 'recipient', 'recipients', 'connection', 'outlook', 'web',
    'client', 'mobile', 'activesync', 'availability', 'migration', 'endpoint',
    'public', 'folder', 'folders', 'report', 'submission', 'tenant', 'allow',
    'block', 'blocked', 'spoof', 'intelligence', 'arc', 'sealer', 'sweep',

    # Teams
    'meeting', 'meetings', 'messaging', 'calling', 'call', 'channel',
    'channels', 'live', 'event', 'events', 'dial', 'plan', 'emergency',
    'audio', 'conferencing', 'routing', 'route', 'routes', 'pstn', 'usage',
    'usages', 'trunk', 'online', 'upgrade', 'app', 'setup', 'feedback',
    'update', 'management', 'files', 'file', 'broadcast', 'guest',
    'federation', 'configuration', 'compliance', 'recording', 'shifts',
    'tenant', 'voicemail', 'caller', 'park', 'emergency', 'number',
    'numbers', 'translation', 'pattern', 'patterns', 'normalization',
    'bypass', 'media', 'video', 'interop', 'encryption', 'enhanced',

    # Security and compliance
    'label', 'labels', 'sensitivity', 'case', 'hold', 'search', 'searches',
    'action', 'actions', 'protection', 'alert', 'alerts', 'supervisory',
    'review', 'insider', 'risk', 'records', 'record', 'auto', 'sensitive',
    'type', 'types', 'fingerprint', 'keyword', 'dictionary', 'communication',
    'device', 'barrier', 'barriers', 'segment', 'segments', 'ediscovery',

    # Common
    'all', 'new', 'old', 'default', 'advanced', 'basic', 'global', 'level',
    'mode', 'on', 'off', 'by', 'to', 'of', 'with', 'per', 'info', 'data',
)


class WordDictionary:
    """Read-only dictionary of known word tokens in segmentation order.

    Args:
        words: Candidate tokens. Lowercased, deduplicated (first occurrence
            wins), then stably sorted by descending length.
    """

    def __init__(self, words: Iterable[str]) -> None:
        unique = dict.fromkeys(w.lower() for w in words if w)
        self._words: tuple[str, ...] = tuple(sorted(unique, key=len, reverse=True))

    @property
    def words(self) -> tuple[str, ...]:
        return self._words

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and token.lower() in self._words


DEFAULT_DICTIONARY = WordDictionary(WORDS)
