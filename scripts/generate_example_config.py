from cloudprint_client.config.manager import ConfigManager

def generate_example_config(path='config.example.toml'):
    config = ConfigManager(path)
    config.config = {
        "cloudprint": {
            "username": "<YOUR_ACCOUNT_EMAIL>",
            "password": "<YOUR_ACCOUNT_PASSWORD>",
            "source": "Google-JS",
            "base_url": "https://www.google.com/cloudprint/",
            "login_url": "https://www.google.com/accounts/ClientLogin"
        },
        "logging": {
            "level": "INFO"
        }
    }
    config.save_config()

if __name__ == "__main__":
    generate_example_config()
