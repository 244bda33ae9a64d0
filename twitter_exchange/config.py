from dotenv import load_dotenv
import os

load_dotenv()

class Config:
    HTTP_TIMEOUT = float(os.getenv('HTTP_TIMEOUT', '10'))
    VERIFY_TLS = os.getenv('VERIFY_TLS', 'true').lower() in ('1','true','yes')

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
