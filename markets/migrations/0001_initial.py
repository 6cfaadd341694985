"""Create the Market table."""

from django.core.validators import MinValueValidator
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Market",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("slug", models.SlugField(max_length=120, unique=True)),
                ("question", models.CharField(max_length=300)),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("politics", "Politics"),
                            ("sports", "Sports"),
                            ("culture", "Culture"),
                            ("bitcoin", "Bitcoin"),
                            ("weather", "Weather"),
                            ("macro", "Macro"),
                        ],
                        default="bitcoin",
                        max_length=16,
                    ),
                ),
                ("yes_price", models.FloatField(blank=True, null=True)),
                ("is_live", models.BooleanField(default=False)),
                ("volume_btc", models.FloatField(default=0.0, validators=[MinValueValidator(0.0)])),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={"ordering": ["-created_at"]},
        ),
    ]
