"""Configuration constants for hardhat-deploy-registry library."""

# Name under which the plugin registers with a code-generation pipeline
PLUGIN_NAME = "hardhat-deploy"

# Extension of files written by `hardhat-deploy --export`
EXPORT_FILE_EXTENSION = ".json"

# Environment variable read when no export directory is passed explicitly
EXPORT_DIR_ENV = "HARDHAT_DEPLOY_EXPORT_DIR"
