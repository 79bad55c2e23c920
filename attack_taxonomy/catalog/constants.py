"""
Named Constants

Readable names for catalog members, for code that references tactics and
techniques symbolically instead of parsing identifier strings.
"""

from attack_taxonomy.catalog.tactics import Tactic
from attack_taxonomy.catalog.techniques import Technique

# Enterprise tactics
ENTERPRISE_RECONNAISSANCE = Tactic.TA0043
ENTERPRISE_RESOURCE_DEVELOPMENT = Tactic.TA0042
ENTERPRISE_INITIAL_ACCESS = Tactic.TA0001
ENTERPRISE_EXECUTION = Tactic.TA0002
ENTERPRISE_PERSISTENCE = Tactic.TA0003
ENTERPRISE_PRIVILEGE_ESCALATION = Tactic.TA0004
ENTERPRISE_DEFENSE_EVASION = Tactic.TA0005
ENTERPRISE_CREDENTIAL_ACCESS = Tactic.TA0006
ENTERPRISE_DISCOVERY = Tactic.TA0007
ENTERPRISE_LATERAL_MOVEMENT = Tactic.TA0008
ENTERPRISE_COLLECTION = Tactic.TA0009
ENTERPRISE_COMMAND_AND_CONTROL = Tactic.TA0011
ENTERPRISE_EXFILTRATION = Tactic.TA0010
ENTERPRISE_IMPACT = Tactic.TA0040

# Mobile tactics
MOBILE_INITIAL_ACCESS = Tactic.TA0027
MOBILE_EXECUTION = Tactic.TA0041
MOBILE_PERSISTENCE = Tactic.TA0028
MOBILE_PRIVILEGE_ESCALATION = Tactic.TA0029
MOBILE_DEFENSE_EVASION = Tactic.TA0030
MOBILE_CREDENTIAL_ACCESS = Tactic.TA0031
MOBILE_DISCOVERY = Tactic.TA0032
MOBILE_LATERAL_MOVEMENT = Tactic.TA0033
MOBILE_COLLECTION = Tactic.TA0035
MOBILE_COMMAND_AND_CONTROL = Tactic.TA0037
MOBILE_EXFILTRATION = Tactic.TA0036
MOBILE_IMPACT = Tactic.TA0034
MOBILE_NETWORK_EFFECTS = Tactic.TA0038
MOBILE_REMOTE_SERVICE_EFFECTS = Tactic.TA0039

# Frequently tagged techniques
OS_CREDENTIAL_DUMPING = Technique.T1003
LSASS_MEMORY = Technique.T1003_001
DCSYNC = Technique.T1003_006
SYSTEM_SERVICE_DISCOVERY = Technique.T1007
EXFILTRATION_OVER_C2_CHANNEL = Technique.T1041
SCHEDULED_TASK = Technique.T1053_005
PROCESS_INJECTION = Technique.T1055
PROCESS_HOLLOWING = Technique.T1055_012
COMMAND_AND_SCRIPTING_INTERPRETER = Technique.T1059
POWERSHELL = Technique.T1059_001
WINDOWS_COMMAND_SHELL = Technique.T1059_003
UNIX_SHELL = Technique.T1059_004
APPLICATION_LAYER_PROTOCOL = Technique.T1071
WEB_PROTOCOLS = Technique.T1071_001
VALID_ACCOUNTS = Technique.T1078
INGRESS_TOOL_TRANSFER = Technique.T1105
BRUTE_FORCE = Technique.T1110
EXPLOIT_PUBLIC_FACING_APPLICATION = Technique.T1190
DATA_ENCRYPTED_FOR_IMPACT = Technique.T1486
REGISTRY_RUN_KEYS = Technique.T1547_001
SPEARPHISHING_ATTACHMENT = Technique.T1566_001
