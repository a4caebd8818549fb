"""Constants shared across dependency resolution."""

# Well-known override mapping looked up on the runtime search path.
DEPS_PROPERTIES_RESOURCE = "depresolve-deps.properties"

DEFAULT_EXTENSION = "jar"
DEFAULT_REMOTE_RESOLVER = "cached-maven"
MAVEN_CENTRAL_URL = "https://repo1.maven.org/maven2"

LAYOUT_FLAT = "flat"
LAYOUT_MAVEN = "maven"
