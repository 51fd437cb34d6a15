# Verification Package
