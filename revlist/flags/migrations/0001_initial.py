import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('contenttypes', '0002_remove_content_type_name'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Flag',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True,
                                        serialize=False, verbose_name='ID')),
                ('object_id', models.PositiveIntegerField(
                    verbose_name='object ID')),
                ('color', models.PositiveSmallIntegerField(
                    choices=[(0, 'Red'), (1, 'Orange'), (2, 'Yellow'),
                             (3, 'Green'), (4, 'Blue'), (5, 'Pink'),
                             (6, 'Purple'), (7, 'Checkered')],
                    default=4,
                    verbose_name='color')),
                ('note', models.TextField(blank=True, verbose_name='note')),
                ('timestamp', models.DateTimeField(
                    default=django.utils.timezone.now,
                    verbose_name='timestamp')),
                ('content_type', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    to='contenttypes.contenttype',
                    verbose_name='content type')),
                ('owner', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='flags',
                    to=settings.AUTH_USER_MODEL,
                    verbose_name='owner')),
            ],
            options={
                'verbose_name': 'Flag',
                'verbose_name_plural': 'Flags',
                'unique_together': {('owner', 'content_type', 'object_id')},
            },
        ),
    ]
