import boto3
import json
import logging

logger = logging.getLogger(__name__)

class S3:
    """AWS Secrets Manager utility class for API credentials."""

    @staticmethod
    def get_secret(secret_name, key=None):
        """Get a secret from AWS Secrets Manager.

        Args:
            secret_name (str): Name of the secret
            key (str, optional): If the secret is a JSON object, get this specific key

        Returns:
            str: The secret value, or None if not found
        """
        client = boto3.client('secretsmanager')
        try:
            response = client.get_secret_value(SecretId=secret_name)
        except client.exceptions.ResourceNotFoundException:
            logger.warning(f"Secret {secret_name} not found")
            return None

        secret_value = response.get('SecretString')
        if secret_value is None or not key:
            return secret_value
        try:
            return json.loads(secret_value).get(key)
        except (json.JSONDecodeError, AttributeError):
            # plain-string secrets hold the key itself
            return secret_value

    @staticmethod
    def store_secret(secret_name, token, api_key):
        """Store an API credential in AWS Secrets Manager.

        Args:
            secret_name (str): Name of the secret
            token (str): API token or account name
            api_key (str): API key

        Returns:
            str: ARN of the created secret, or None if it already exists
        """
        client = boto3.client('secretsmanager')
        secret_value = {
            'api_token': token,
            'api_key': api_key
        }
        try:
            response = client.create_secret(
                Name=secret_name,
                SecretString=json.dumps(secret_value)
            )
            return response['ARN']
        except client.exceptions.ResourceExistsException:
            logger.warning(f"Secret {secret_name} already exists. Use update_secret method to modify it.")
            return None
