from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="SettingsEntry",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("key", models.CharField(help_text="Settings key, e.g. 'credit_union_rates'.", max_length=191, unique=True)),
                ("value", models.JSONField(help_text="Stored value, serialised as JSON.")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Settings Entry",
                "verbose_name_plural": "Settings Entries",
                "ordering": ["key"],
            },
        ),
    ]
