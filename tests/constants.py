HOST = "pi.hole"
BASE_URL = f"http://{HOST}/admin/api.php"
TOKEN = "0123456789abcdef"
