"""
Lambda function serving Minecraft: Java Edition patch notes as a feed
GET /json returns JSON Feed, every other path returns RSS 2.0
"""
import logging
from typing import Dict, Any

from patchnotes.config import load_settings
from patchnotes.context import FeedContext
from patchnotes.handler import FeedRequest, handle

settings = load_settings()

# Configure logging
logger = logging.getLogger()
logger.setLevel(settings.log_level)

def lambda_handler(event: Dict[str, Any], context) -> Dict[str, Any]:
    """
    Lambda handler for the patch notes feed
    
    Expected input: Function URL or API Gateway proxy event
    {
        "rawPath": "/json",
        "headers": {"host": "feed.example.com"},
        "requestContext": {"domainName": "feed.example.com"}
    }
    
    Output:
    {
        "statusCode": 200,
        "headers": {"content-type": "application/json"},
        "body": "..."
    }
    """
    request = FeedRequest.from_event(event, settings.fallback_host)
    feed_context = FeedContext(settings=settings)
    try:
        logger.info(f"Serving {request.path} for {request.host}")
        return handle(request, feed_context).to_lambda()
        
    except Exception as e:
        logger.error(f"Error building patch notes feed for {request.url}: {str(e)}")
        raise
    finally:
        feed_context.close()
