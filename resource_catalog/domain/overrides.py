"""Manual friendly-name overrides.

Keys are lowercase original resource names. Values are used verbatim and
take precedence over documentation casing and dictionary segmentation.
"""

from types import MappingProxyType

MANUAL_OVERRIDES = MappingProxyType({
    # Exchange
    'antiphishpolicy': 'Anti-Phish Policy',
    'antiphishrule': 'Anti-Phish Rule',
    'hostedcontentfilterpolicy': 'Anti-Spam Inbound Policy',
    'hostedcontentfilterrule': 'Anti-Spam Inbound Rule',
    'hostedoutboundspamfilterpolicy': 'Anti-Spam Outbound Policy',
    'hostedoutboundspamfilterrule': 'Anti-Spam Outbound Rule',
    'hostedconnectionfilterpolicy': 'Connection Filter Policy',
    'malwarefilterpolicy': 'Anti-Malware Policy',
    'malwarefilterrule': 'Anti-Malware Rule',
    'dkimsigningconfig': 'DKIM Signing Configuration',
    'owamailboxpolicy': 'Outlook on the Web Mailbox Policy',
    'casmailboxplan': 'Client Access Mailbox Plan',
    'casmailboxsettings': 'Client Access Mailbox Settings',
    'atppolicyforo365': 'Defender for Office 365 Policy',
    'eopprotectionpolicyrule': 'EOP Protection Policy Rule',

    # Intune
    'deviceandappmanagementassignmentfilter': 'Assignment Filter',
    'devicemanagementconfigurationpolicy': 'Settings Catalog Policy',
    'windowsautopilotdeploymentprofile': 'Windows Autopilot Deployment Profile',
    'windowsinformationprotectionpolicy': 'Windows Information Protection Policy',
    'intunedeviceenrollmentstatuspagewindows10': 'Enrollment Status Page (Windows 10)',

    # Entra
    'aadmfa': 'Entra Multifactor Authentication',
    'aadcrosstenantaccesspolicy': 'Cross-Tenant Access Policy',

    # Teams
    'csteamsclientconfiguration': 'Teams Client Configuration',
    'csonlinevoicemailpolicy': 'Online Voicemail Policy',

    # Security & Compliance
    'dlpcompliancepolicy': 'DLP Compliance Policy',
    'protectionalert': 'Protection Alert',
})
