TEST_BASE_URL = "https://example.com"
TEST_DOMAIN = "example.com"
TEST_NAMESPACE = "user"
TEST_ALIAS = "alice"
TEST_DID = f"did:web:{TEST_DOMAIN}:{TEST_NAMESPACE}:{TEST_ALIAS}"
TEST_SIGNING_KEY = "z6Mkixacx8HJ5nRBJvJKNdv83v1ejZBpz3HvRCfa2JaKbQJV"

TEST_DID_DOCUMENT = {
    "@context": ["https://www.w3.org/ns/did/v1"],
    "id": TEST_DID,
    "verificationMethod": [
        {
            "id": f"{TEST_DID}#key-0",
            "type": "Multikey",
            "controller": TEST_DID,
            "publicKeyMultibase": TEST_SIGNING_KEY,
        }
    ],
    "authentication": [f"{TEST_DID}#key-0"],
}

TEST_UPDATED_DID_DOCUMENT = {
    **TEST_DID_DOCUMENT,
    "service": [
        {
            "id": f"{TEST_DID}#whois",
            "type": "LinkedVerifiablePresentation",
            "serviceEndpoint": f"https://{TEST_DOMAIN}/{TEST_NAMESPACE}/{TEST_ALIAS}/whois.vp",
        }
    ],
}

TEST_ANONYMOUS_DID_DOCUMENT = {
    "@context": ["https://www.w3.org/ns/did/v1"],
    "alsoKnownAs": ["https://example.org/profile"],
}
